"""Policy — правила допуска переходов состояния сущностей."""

from .cancellation import (
    CANCELLATION_RULES,
    CancellationDecision,
    CancellationPolicy,
    CancellationPolicyConfig,
    CancellationReason,
    CancellationRule,
)

__all__ = [
    "CANCELLATION_RULES",
    "CancellationDecision",
    "CancellationPolicy",
    "CancellationPolicyConfig",
    "CancellationReason",
    "CancellationRule",
]
