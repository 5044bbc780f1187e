"""Global configuration for the Freivalds verifier."""

import os


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read an integer knob from the environment, rejecting values < *minimum*."""
    value = int(os.environ.get(name, str(default)))
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


# ---------- Prime field ----------
# All arithmetic is mod PRIME.  GENERATOR generates the multiplicative group
# F_p^*; it is field configuration only, the check itself never uses it.
PRIME = 17
GENERATOR = 3

# ---------- Verification ----------
# Independent trials per claim.  One trial accepts a false claim with
# probability <= (n-1)/PRIME; k trials bring that to ((n-1)/PRIME)**k.
DEFAULT_TRIALS = _env_int("FREIVALDS_TRIALS", 1)
# Upper bound on trials per request to the verifier service.
MAX_TRIALS = _env_int("FREIVALDS_MAX_TRIALS", 64, minimum=DEFAULT_TRIALS)

# ---------- Verifier service (used by the demo) ----------
VERIFIER_URL = os.environ.get("FREIVALDS_VERIFIER_URL", "http://localhost:8000")

# ---------- Audit log ----------
AUDIT_GENESIS_HASH = "0" * 64
