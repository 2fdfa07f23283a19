"""
Fee Schedule lookup.

Maps a class grade to its total fee. An unknown grade is reported
as UnpricedGradeException instead of being priced at zero.
"""

from typing import List

from fee_engine.domain.exceptions import UnpricedGradeException

from .settings import BillingSettings, billing_settings


def _normalize_grade(grade: str) -> str:
    return grade.strip().upper()


def is_priced(
    grade: str,
    settings: BillingSettings = billing_settings,
) -> bool:
    """Whether a class grade has a fee configured."""
    schedule = {_normalize_grade(g): fee for g, fee in settings.fee_schedule.items()}
    return _normalize_grade(grade) in schedule


def get_total_fee(
    grade: str,
    settings: BillingSettings = billing_settings,
) -> int:
    """
    Look up the total fee for a class grade.

    Args:
        grade: Class grade code (e.g. "JSS1"), matched case-insensitively
        settings: Billing settings (uses defaults if not provided)

    Returns:
        Total fee in whole naira

    Raises:
        UnpricedGradeException: If the grade has no schedule entry
    """
    schedule = {_normalize_grade(g): fee for g, fee in settings.fee_schedule.items()}
    try:
        return schedule[_normalize_grade(grade)]
    except KeyError:
        raise UnpricedGradeException(grade) from None


def list_class_grades(settings: BillingSettings = billing_settings) -> List[str]:
    """Class grades offered at registration, in schedule order."""
    return list(settings.fee_schedule)
