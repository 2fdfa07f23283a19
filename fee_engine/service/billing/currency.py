"""Currency formatting for displayed amounts."""

from .settings import BillingSettings, billing_settings


def format_naira(
    amount: int,
    settings: BillingSettings = billing_settings,
) -> str:
    """
    Format a whole-naira amount for display.

    Zero decimal places with thousands separators. Negative amounts
    are formatted rather than rejected.

    Args:
        amount: Amount in whole naira
        settings: Billing settings (uses defaults if not provided)

    Returns:
        Formatted string, e.g. "₦1,000" or "-₦250"
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{settings.currency_symbol}{abs(amount):,}"
