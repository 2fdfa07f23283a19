"""
Billing Module for the school fee engine.
"""

from .settings import BillingSettings, billing_settings
from .currency import format_naira
from .fee_schedule import get_total_fee, is_priced, list_class_grades
from .banks import Bank, NIGERIAN_BANKS, get_bank, get_bank_name
from .installment import (
    compute_installment,
    max_payments,
    installment_count_options,
)
from .plan_selection import validate_plan_selection
from .display import resolve_display_amount, amount_label, plan_label
from .status import classify
from .polling import (
    is_open,
    should_poll,
    total_outstanding,
    with_pending_amount,
    reselect,
)

__all__ = [
    # Settings
    "BillingSettings",
    "billing_settings",
    # Currency
    "format_naira",
    # Fee Schedule
    "get_total_fee",
    "is_priced",
    "list_class_grades",
    # Banks
    "Bank",
    "NIGERIAN_BANKS",
    "get_bank",
    "get_bank_name",
    # Installments
    "compute_installment",
    "max_payments",
    "installment_count_options",
    # Plan Selection
    "validate_plan_selection",
    # Display
    "resolve_display_amount",
    "amount_label",
    "plan_label",
    # Status
    "classify",
    # Polling
    "is_open",
    "should_poll",
    "total_outstanding",
    "with_pending_amount",
    "reselect",
]
