"""Readiness verdict from a success rate."""

from modulith_audit.models.audit import VerdictTier

EXCELLENT_THRESHOLD = 90
ATTENTION_THRESHOLD = 70


def classify_verdict(success_rate: float) -> VerdictTier:
    """Map a success rate to a verdict tier.

    Thresholds are inclusive lower bounds: 90 and up is excellent,
    70 up to 90 needs attention, anything below 70 is critical.
    """
    if success_rate >= EXCELLENT_THRESHOLD:
        return VerdictTier.EXCELLENT
    if success_rate >= ATTENTION_THRESHOLD:
        return VerdictTier.NEEDS_ATTENTION
    return VerdictTier.CRITICAL
