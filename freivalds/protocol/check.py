"""Freivalds' probabilistic check of a claimed product A·B = C.

The verifier delegates the O(n^3) product to an untrusted prover and
checks the claimed C in O(n^2):

    1. Sample a random field element r.
    2. Build the probe vector v = (1, r, r^2, ..., r^(n-1)).
    3. Accept iff A·(B·v) == C·v.

If A·B = C the check accepts for every r.  If A·B != C, each row of
(A·B - C)·v is a polynomial in r of degree <= n-1, and at least one of
them is non-zero, so a single trial accepts with probability at most
(n-1)/p.  Running k independent trials (``trials=k``) and accepting only
if all of them accept lowers that to ((n-1)/p)^k.
"""

from __future__ import annotations

import logging
from typing import Any

from freivalds.algebra.field import FieldElement
from freivalds.algebra.matrix import Matrix, ShapeMismatch, Vector, matrix_vector_multiply
from freivalds.config import DEFAULT_TRIALS

logger = logging.getLogger(__name__)


def check_shapes(a: Matrix, b: Matrix, c: Matrix) -> int:
    """Return the common dimension n of three n×n matrices.

    Raises ``ShapeMismatch`` if any matrix is not square or the three do
    not share the same n.
    """
    n = a.num_rows
    for name, m in (("A", a), ("B", b), ("C", c)):
        for i, row in enumerate(m):
            if len(row) != m.num_rows:
                raise ShapeMismatch(
                    f"{name} is not square: row {i} has length {len(row)}, "
                    f"matrix has {m.num_rows} rows"
                )
        if m.num_rows != n:
            raise ShapeMismatch(
                f"{name} is {m.num_rows}x{m.num_rows}, expected {n}x{n}"
            )
    if not (a.field == b.field == c.field):
        raise ValueError("A, B and C must be defined over the same field")
    return n


def probe_vector(r: FieldElement, n: int) -> Vector:
    """Return v = (1, r, r^2, ..., r^(n-1)) built by repeated multiplication."""
    entries = []
    cur = r.field.one()
    for _ in range(n):
        entries.append(cur)
        cur = cur * r
    return Vector(entries, r.field)


def _single_trial(a: Matrix, b: Matrix, c: Matrix, n: int, rng: Any) -> bool:
    r = a.field.random(rng)
    v = probe_vector(r, n)
    left = matrix_vector_multiply(a, matrix_vector_multiply(b, v))
    right = matrix_vector_multiply(c, v)
    if left != right:
        logger.debug("trial rejected at r=%d", r.value)
        return False
    return True


def verify(
    a: Matrix,
    b: Matrix,
    c: Matrix,
    rng: Any = None,
    trials: int = DEFAULT_TRIALS,
) -> bool:
    """Check the claim ``a @ b == c`` without computing the product.

    *rng* is the random source for r (anything with ``randrange``); pass a
    seeded ``random.Random`` for reproducible verdicts.  *trials* is the
    number of independent draws; the claim is accepted only if every
    trial accepts.

    Never rejects a true claim.  Shapes are checked before any randomness
    is consumed.
    """
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")
    n = check_shapes(a, b, c)
    for _ in range(trials):
        if not _single_trial(a, b, c, n, rng):
            return False
    return True


def false_accept_bound(n: int, modulus: int, trials: int = 1) -> float:
    """Upper bound on accepting a false n×n claim over F_modulus.

    Pr[accept | A·B != C] <= ((n-1)/p)^trials
    """
    if n <= 1:
        return 0.0
    return min(1.0, (n - 1) / modulus) ** trials

