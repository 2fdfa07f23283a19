"""Pydantic schemas for backend request/response validation."""

from .payment import (
    VirtualAccountSchema,
    PaymentRecordSchema,
    ChildSummarySchema,
    payments_from_api,
    snapshot_from_api,
)
from .plan import PlanRequestSchema, SwitchPlanRequestSchema

__all__ = [
    "VirtualAccountSchema",
    "PaymentRecordSchema",
    "ChildSummarySchema",
    "payments_from_api",
    "snapshot_from_api",
    "PlanRequestSchema",
    "SwitchPlanRequestSchema",
]
