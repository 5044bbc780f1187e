"""Tests for the verdict audit log."""

from freivalds.config import AUDIT_GENESIS_HASH
from freivalds.verifier.audit import AuditLog, claim_digest

CLAIM = ([[8, 2], [1, 5]], [[3, 4], [9, 2]], [[8, 2], [14, 14]])


def test_record_and_verify():
    log = AuditLog()
    log.record(claim_digest(*CLAIM), 2, 1, True)
    log.record(claim_digest(*CLAIM), 2, 3, False)
    assert len(log) == 2
    assert len(log.entries()) == 2
    assert log.verify_chain()


def test_empty_chain():
    log = AuditLog()
    assert log.verify_chain()


def test_chain_links():
    log = AuditLog()
    e1 = log.record("aa", 1, 1, True)
    e2 = log.record("bb", 1, 1, False)
    assert e1.prev_hash == AUDIT_GENESIS_HASH
    assert e2.prev_hash == e1.entry_hash


def test_tampered_verdict_breaks_chain():
    log = AuditLog()
    log.record("aa", 2, 1, False)
    log.record("bb", 2, 1, True)
    log._entries[0].accepted = True
    assert not log.verify_chain()


def test_claim_digest_is_order_sensitive():
    a, b, c = CLAIM
    assert claim_digest(a, b, c) == claim_digest(a, b, c)
    assert claim_digest(a, b, c) != claim_digest(b, a, c)
