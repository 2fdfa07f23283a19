"""
Payment Plan Selector.

Validates a parent's plan choice together with the bank and installment
details it requires, and normalizes it into the request forwarded to the
payment backend. Bad user input is returned as ValidationError values;
only an unknown plan type is raised.
"""

import re
from typing import Any, List, Optional

import structlog

from fee_engine.domain.entities import (
    BankSelection,
    Frequency,
    InstallmentSelection,
    NormalizedPlanRequest,
    PlanSelectionResult,
    PlanType,
    ValidationError,
)
from fee_engine.domain.exceptions import UnknownPlanTypeException

from .installment import max_payments
from .settings import BillingSettings, billing_settings

logger = structlog.get_logger(__name__)

ACCOUNT_NUMBER_PATTERN = re.compile(r"[0-9]{10}")


def _validate_bank(bank: Optional[BankSelection]) -> List[ValidationError]:
    bank_code = bank.bank_code if bank else None
    account_number = bank.account_number if bank else None

    errors = []
    if not bank_code or not bank_code.strip():
        errors.append(ValidationError("bank_code", "Please select your bank"))
    if not account_number or not ACCOUNT_NUMBER_PATTERN.fullmatch(account_number):
        errors.append(
            ValidationError("account_number", "Account number must be exactly 10 digits")
        )
    return errors


def _validate_installment(
    installment: Optional[InstallmentSelection],
    settings: BillingSettings,
) -> tuple[Optional[Frequency], List[ValidationError]]:
    raw_frequency = installment.frequency if installment else None
    count = installment.count if installment else None

    errors = []
    frequency = Frequency.parse(raw_frequency)
    if frequency is None:
        if raw_frequency is None or raw_frequency == "":
            errors.append(ValidationError("frequency", "Please select a payment frequency"))
        else:
            errors.append(
                ValidationError("frequency", "Payment frequency must be WEEKLY or MONTHLY")
            )

    if count is None:
        errors.append(ValidationError("count", "Please select duration"))
    elif isinstance(count, bool) or not isinstance(count, int):
        errors.append(ValidationError("count", "Number of payments must be a whole number"))
    elif frequency is not None:
        limit = max_payments(frequency, settings)
        if not 1 <= count <= limit:
            errors.append(
                ValidationError("count", f"Number of payments must be between 1 and {limit}")
            )

    return frequency, errors


def validate_plan_selection(
    plan_type: Any,
    bank: Optional[BankSelection] = None,
    installment: Optional[InstallmentSelection] = None,
    settings: BillingSettings = billing_settings,
) -> PlanSelectionResult:
    """
    Validate a plan selection and normalize it for submission.

    Rules:
        - SINGLE: nothing else required; bank and installment details
          are dropped from the request
        - INSTALLMENT: frequency, a count within 1..max(frequency),
          and bank details are required
        - SUBSCRIPTION: bank details are required; frequency is always
          MONTHLY and no count is sent

    Bank details require a non-blank bank code and a 10-digit account
    number. Every violated rule produces its own ValidationError.

    Args:
        plan_type: PlanType or its string form
        bank: Bank the mandate will debit
        installment: Frequency and count chosen by the parent
        settings: Billing settings (uses defaults if not provided)

    Returns:
        PlanSelectionResult carrying either the normalized request or
        the list of errors

    Raises:
        UnknownPlanTypeException: If plan_type is not a known plan
    """
    parsed = PlanType.parse(plan_type)
    if parsed is None:
        raise UnknownPlanTypeException(plan_type)

    if parsed == PlanType.SINGLE:
        return PlanSelectionResult(request=NormalizedPlanRequest(plan_type=PlanType.SINGLE))

    errors = []
    frequency = Frequency.MONTHLY
    count = None

    if parsed == PlanType.INSTALLMENT:
        frequency, installment_errors = _validate_installment(installment, settings)
        errors.extend(installment_errors)
        count = installment.count if installment else None
    elif installment is not None:
        logger.debug("subscription_installment_ignored", frequency=str(installment.frequency))

    errors.extend(_validate_bank(bank))

    if errors:
        logger.info(
            "plan_selection_rejected",
            plan_type=parsed.value,
            fields=[error.field for error in errors],
        )
        return PlanSelectionResult(errors=errors)

    return PlanSelectionResult(
        request=NormalizedPlanRequest(
            plan_type=parsed,
            frequency=frequency,
            number_of_payments=count,
            bank_code=bank.bank_code.strip(),
            account_number=bank.account_number,
        )
    )
