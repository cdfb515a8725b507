"""Domain policies (pure decision functions)."""

from campus_events.domain.policies.admission_policy import decide_admission

__all__ = ["decide_admission"]
