#!/usr/bin/env python3
"""Freivalds verifier demo.

Usage (with the service running, e.g. ``uvicorn freivalds.verifier.app:app``):
    python -m freivalds.demo.run_demo

The script:
1. Asks the verifier which field claims live in.
2. Submits an honest claim A·B = C and shows it is accepted.
3. Submits a tampered C and shows how often a single trial catches it.
4. Re-submits the tampered claim with more trials.
5. Sends a malformed (non-square) claim to show shape validation.
6. Dumps the audit log.
"""

from __future__ import annotations

import httpx

from freivalds.config import VERIFIER_URL

# ---------- sample claim over F_17 ----------------------------------------
A = [[8, 2], [1, 5]]
B = [[3, 4], [9, 2]]
C_HONEST = [[8, 2], [14, 14]]   # A·B mod 17
C_TAMPERED = [[8, 3], [14, 14]]


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def run(client: httpx.Client, rounds: int = 50) -> dict:
    """Walk through the demo against *client*; return a summary dict."""
    summary: dict = {}

    # ---- 1. Field ----
    banner("1) Field")
    resp = client.get("/field")
    resp.raise_for_status()
    field = resp.json()
    print(f"   F_{field['modulus']}, generator {field['generator']}")
    summary["modulus"] = field["modulus"]

    # ---- 2. Honest claim ----
    banner("2) Honest claim A·B = C")
    resp = client.post("/verify", json={"a": A, "b": B, "c": C_HONEST})
    resp.raise_for_status()
    body = resp.json()
    print(f"   accepted={body['accepted']}  (bound on false accept {body['false_accept_bound']:.4f})")
    summary["honest_accepted"] = body["accepted"]

    # ---- 3. Tampered claim, single trial ----
    banner(f"3) Tampered claim, {rounds} single-trial checks")
    fooled = 0
    for seed in range(rounds):
        resp = client.post(
            "/verify", json={"a": A, "b": B, "c": C_TAMPERED, "seed": seed}
        )
        resp.raise_for_status()
        if resp.json()["accepted"]:
            fooled += 1
    print(f"   fooled {fooled}/{rounds} times")
    summary["tampered_fooled"] = fooled

    # ---- 4. Tampered claim, amplified ----
    banner("4) Tampered claim, 10 trials")
    resp = client.post("/verify", json={"a": A, "b": B, "c": C_TAMPERED, "trials": 10})
    resp.raise_for_status()
    body = resp.json()
    print(f"   accepted={body['accepted']}  (bound on false accept {body['false_accept_bound']:.2e})")
    summary["amplified_accepted"] = body["accepted"]

    # ---- 5. Malformed claim ----
    banner("5) Non-square claim")
    resp = client.post("/verify", json={"a": [[1, 2, 3], [4, 5, 6]], "b": B, "c": C_HONEST})
    print(f"   HTTP {resp.status_code}: {resp.json().get('detail')}")
    summary["malformed_status"] = resp.status_code

    # ---- 6. Audit ----
    banner("6) Audit log")
    resp = client.get("/audit")
    resp.raise_for_status()
    audit = resp.json()
    print(f"   Entries: {len(audit['entries'])}")
    print(f"   Chain valid: {audit['chain_valid']}")
    for e in audit["entries"][:5]:
        verdict = "accept" if e["accepted"] else "reject"
        print(f"     [{verdict}] {e['entry_hash'][:12]}… ← {e['prev_hash'][:12]}…")
    summary["audit_entries"] = len(audit["entries"])
    summary["chain_valid"] = audit["chain_valid"]

    return summary


def main() -> None:
    with httpx.Client(base_url=VERIFIER_URL, timeout=15.0) as client:
        run(client)
    banner("Done")


if __name__ == "__main__":
    main()
