"""
Payment Status Classifier.

Maps raw backend status strings onto the closed set of presentation
states. The backend may add statuses at any time, so unmatched values
degrade to UNKNOWN instead of failing.
"""

from typing import Optional

from fee_engine.domain.entities import PaymentState, StatusClassification

_LABELS = {
    PaymentState.PENDING: "Pending",
    PaymentState.ACTIVE: "Active",
    PaymentState.SUCCESSFUL: "Successful",
    PaymentState.FAILED: "Failed",
    PaymentState.CANCELLED: "Cancelled",
    PaymentState.COMPLETED: "Completed",
}

_BADGES = {
    PaymentState.PENDING: "pending",
    PaymentState.ACTIVE: "active",
    PaymentState.SUCCESSFUL: "success",
    PaymentState.COMPLETED: "success",
    PaymentState.FAILED: "destructive",
    PaymentState.CANCELLED: "destructive",
}


def classify(raw_status: Optional[str]) -> StatusClassification:
    """
    Classify a raw status string.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        raw_status: Status exactly as the backend sent it

    Returns:
        StatusClassification; UNKNOWN statuses keep the raw string
        as their label and use the neutral "outline" badge
    """
    normalized = (raw_status or "").strip().upper()
    try:
        state = PaymentState(normalized)
    except ValueError:
        state = PaymentState.UNKNOWN

    if state == PaymentState.UNKNOWN:
        return StatusClassification(
            state=PaymentState.UNKNOWN,
            label=raw_status or "",
            badge="outline",
        )

    return StatusClassification(state=state, label=_LABELS[state], badge=_BADGES[state])
