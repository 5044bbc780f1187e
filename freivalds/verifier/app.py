"""Verifier FastAPI application.

A prover posts a claim (A, B, C) with A·B = C; the verifier checks it
with Freivalds' algorithm in O(n^2) per trial and records the verdict.

Endpoints:
- GET  /field   – modulus and generator of the field claims live in
- POST /verify  – check a claim, return accept / reject
- GET  /audit   – hash-chained verdict log

Run with:  uvicorn freivalds.verifier.app:app
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from freivalds.algebra.field import DEFAULT_FIELD, PrimeField
from freivalds.algebra.matrix import Matrix, ShapeMismatch
from freivalds.config import DEFAULT_TRIALS, MAX_TRIALS
from freivalds.protocol.check import false_accept_bound, verify
from freivalds.verifier.audit import AuditLog, claim_digest

logger = logging.getLogger(__name__)

# ------ request / response models ------


class VerifyRequest(BaseModel):
    a: List[List[int]]
    b: List[List[int]]
    c: List[List[int]]
    trials: int = Field(default=DEFAULT_TRIALS, ge=1, le=MAX_TRIALS)
    # Fixed seed -> reproducible verdict (testing only)
    seed: Optional[int] = None


class VerifyResponse(BaseModel):
    accepted: bool
    dimension: int
    trials: int
    false_accept_bound: float


class FieldResponse(BaseModel):
    modulus: int
    generator: Optional[int]


class AuditResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


class VerifierState:
    """Per-app state: the field, the random source and the audit log."""

    def __init__(self, field: PrimeField = DEFAULT_FIELD, rng: Any = None) -> None:
        self.field = field
        self.rng = rng
        self.audit = AuditLog()


def create_app(state: VerifierState | None = None) -> FastAPI:
    """Factory that creates a verifier app around *state*."""
    if state is None:
        state = VerifierState()

    app = FastAPI(title=f"Freivalds Verifier (F_{state.field.modulus})")

    @app.get("/field", response_model=FieldResponse)
    async def field_info():
        return FieldResponse(modulus=state.field.modulus, generator=state.field.generator)

    @app.post("/verify", response_model=VerifyResponse)
    def verify_claim(req: VerifyRequest):
        # CPU-bound; plain def so FastAPI runs it in its threadpool
        a = Matrix.from_rows(req.a, state.field)
        b = Matrix.from_rows(req.b, state.field)
        c = Matrix.from_rows(req.c, state.field)

        rng = random.Random(req.seed) if req.seed is not None else state.rng
        try:
            accepted = verify(a, b, c, rng=rng, trials=req.trials)
        except ShapeMismatch as exc:
            raise HTTPException(422, str(exc))

        n = a.num_rows
        entry = state.audit.record(
            claim_digest(a.to_lists(), b.to_lists(), c.to_lists()), n, req.trials, accepted
        )
        logger.info(
            "claim %s (n=%d, trials=%d): %s",
            entry.claim_digest[:12], n, req.trials, "accepted" if accepted else "rejected",
        )
        return VerifyResponse(
            accepted=accepted,
            dimension=n,
            trials=req.trials,
            false_accept_bound=false_accept_bound(n, state.field.modulus, req.trials),
        )

    @app.get("/audit", response_model=AuditResponse)
    async def audit():
        return AuditResponse(entries=state.audit.entries(), chain_valid=state.audit.verify_chain())

    return app


app = create_app()
