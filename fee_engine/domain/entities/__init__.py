"""Domain Entities - Core business objects."""

from .plan import (
    Frequency,
    PlanType,
    InstallmentResult,
    BankSelection,
    InstallmentSelection,
    ValidationError,
    NormalizedPlanRequest,
    PlanSelectionResult,
)
from .payment import (
    PaymentState,
    AmountSource,
    VirtualAccount,
    PaymentRecord,
    StatusClassification,
    DisplayAmount,
    ChildSummary,
    PaymentSnapshot,
)

__all__ = [
    "Frequency",
    "PlanType",
    "InstallmentResult",
    "BankSelection",
    "InstallmentSelection",
    "ValidationError",
    "NormalizedPlanRequest",
    "PlanSelectionResult",
    "PaymentState",
    "AmountSource",
    "VirtualAccount",
    "PaymentRecord",
    "StatusClassification",
    "DisplayAmount",
    "ChildSummary",
    "PaymentSnapshot",
]
