"""
Installment Calculator for school fee plans.

Splits a total fee into a down payment and a fixed number of weekly
or monthly payments. All rounding is upward, so the scheduled payments
may overshoot the remaining balance on the last period; reconciling
that period is left to the payment backend.
"""

from typing import Any, List, Optional

from fee_engine.domain.entities import Frequency, InstallmentResult
from fee_engine.domain.exceptions import (
    InvalidFrequencyException,
    InvalidInstallmentConfigException,
)

from .settings import BillingSettings, billing_settings


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _require_frequency(frequency: Any) -> Frequency:
    if isinstance(frequency, Frequency):
        return frequency
    parsed = Frequency.parse(frequency)
    if parsed is None:
        raise InvalidFrequencyException(frequency)
    return parsed


def max_payments(
    frequency: Frequency,
    settings: BillingSettings = billing_settings,
) -> int:
    """
    Maximum (and default) number of payments for a frequency.

    Args:
        frequency: WEEKLY or MONTHLY
        settings: Billing settings (uses defaults if not provided)

    Returns:
        12 for weekly and 3 for monthly with default settings

    Raises:
        InvalidFrequencyException: If frequency is not a known value
    """
    frequency = _require_frequency(frequency)
    if frequency == Frequency.WEEKLY:
        return settings.weekly_max_payments
    return settings.monthly_max_payments


def installment_count_options(
    frequency: Frequency,
    settings: BillingSettings = billing_settings,
) -> List[int]:
    """Payment counts a parent may pick for a frequency (1 through the maximum)."""
    return list(range(1, max_payments(frequency, settings) + 1))


def compute_installment(
    total_fee: int,
    frequency: Frequency,
    requested_count: Optional[int] = None,
    down_payment_percent: Optional[int] = None,
    settings: BillingSettings = billing_settings,
) -> InstallmentResult:
    """
    Compute the installment breakdown for a total fee.

    Algorithm:
        1. down_payment = ceil(total_fee * percent / 100)
        2. remaining_amount = total_fee - down_payment
        3. number_of_payments = requested_count when 1 <= count <= max,
           otherwise the frequency default (which equals the max)
        4. amount_per_payment = ceil(remaining_amount / number_of_payments)

    Args:
        total_fee: Total fee in whole naira
        frequency: WEEKLY or MONTHLY
        requested_count: Number of payments the parent asked for; ignored
            when missing or out of range
        down_payment_percent: Up-front share (defaults to settings)
        settings: Billing settings (uses defaults if not provided)

    Returns:
        InstallmentResult with the full breakdown

    Raises:
        InvalidFrequencyException: If frequency is not WEEKLY or MONTHLY
        InvalidInstallmentConfigException: If the percent is outside 0-100

    Example:
        compute_installment(1000, Frequency.WEEKLY)
        → down 200, remaining 800, 12 payments of 67
    """
    frequency = _require_frequency(frequency)

    if down_payment_percent is None:
        down_payment_percent = settings.down_payment_percent
    if not 0 <= down_payment_percent <= 100:
        raise InvalidInstallmentConfigException(
            f"down_payment_percent must be between 0 and 100, got {down_payment_percent}"
        )

    down_payment = _ceil_div(total_fee * down_payment_percent, 100)
    remaining_amount = total_fee - down_payment

    limit = max_payments(frequency, settings)
    number_of_payments = limit
    if requested_count is not None and 0 < requested_count <= limit:
        number_of_payments = requested_count

    amount_per_payment = _ceil_div(remaining_amount, number_of_payments)

    return InstallmentResult(
        down_payment=down_payment,
        remaining_amount=remaining_amount,
        number_of_payments=number_of_payments,
        amount_per_payment=amount_per_payment,
        frequency=frequency,
    )
