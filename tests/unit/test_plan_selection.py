"""
Unit Tests for the Payment Plan Selector.

These tests verify:
1. Per-plan requirements (single, installment, subscription)
2. One validation error per violated rule
3. Normalization of fields that do not apply to the plan
4. Payload serialization for registration and plan switching
"""

import pytest

from fee_engine.domain.entities import (
    BankSelection,
    Frequency,
    InstallmentSelection,
    PlanType,
)
from fee_engine.domain.exceptions import UnknownPlanTypeException
from fee_engine.presentation.schemas import PlanRequestSchema, SwitchPlanRequestSchema
from fee_engine.service.billing import validate_plan_selection


VALID_BANK = BankSelection(bank_code="058", account_number="0123456789")


# =============================================================================
# Single Payment Tests
# =============================================================================

class TestSinglePlan:
    """SINGLE needs nothing beyond the plan type."""

    def test_no_requirements(self):
        result = validate_plan_selection(PlanType.SINGLE)

        assert result.is_valid
        assert result.request.plan_type == PlanType.SINGLE

    def test_bank_and_installment_are_dropped(self):
        """Extra details are normalized to absent, not kept or zeroed."""
        result = validate_plan_selection(
            "SINGLE_PAYMENT",
            bank=BankSelection(bank_code="", account_number="12"),
            installment=InstallmentSelection(frequency="WEEKLY", count=4),
        )

        assert result.is_valid
        request = result.request
        assert request.frequency is None
        assert request.number_of_payments is None
        assert request.bank_code is None
        assert request.account_number is None

    @pytest.mark.parametrize("raw", ["single", "SINGLE", "Single_Payment", "ONE_TIME"])
    def test_single_aliases(self, raw):
        assert validate_plan_selection(raw).request.plan_type == PlanType.SINGLE


# =============================================================================
# Installment Tests
# =============================================================================

class TestInstallmentPlan:
    """INSTALLMENT needs frequency, count and bank details."""

    def test_valid_selection(self):
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="weekly", count=6),
        )

        assert result.is_valid
        request = result.request
        assert request.plan_type == PlanType.INSTALLMENT
        assert request.frequency == Frequency.WEEKLY
        assert request.number_of_payments == 6
        assert request.bank_code == "058"
        assert request.account_number == "0123456789"

    def test_everything_missing(self):
        """Each missing field is reported separately."""
        result = validate_plan_selection(PlanType.INSTALLMENT)

        assert not result.is_valid
        assert result.request is None
        assert [e.field for e in result.errors] == [
            "frequency",
            "count",
            "bank_code",
            "account_number",
        ]

    def test_count_above_monthly_max(self):
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency=Frequency.MONTHLY, count=4),
        )

        assert len(result.errors) == 1
        assert result.error_for("count") == "Number of payments must be between 1 and 3"

    def test_count_zero_rejected(self):
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="WEEKLY", count=0),
        )

        assert result.error_for("count") == "Number of payments must be between 1 and 12"

    def test_weekly_max_accepted(self):
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="WEEKLY", count=12),
        )
        assert result.is_valid

    def test_unknown_frequency(self):
        """A bad frequency is user input, reported as a field error."""
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="DAILY", count=2),
        )

        assert [e.field for e in result.errors] == ["frequency"]
        assert "WEEKLY or MONTHLY" in result.error_for("frequency")

    @pytest.mark.parametrize("frequency", ["DAILY", "MONTHLY"])
    @pytest.mark.parametrize("count", ["3", 2.5, True])
    def test_non_integer_count(self, frequency, count):
        """Count type is checked whether or not the frequency parses."""
        result = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency=frequency, count=count),
        )

        assert result.error_for("count") == "Number of payments must be a whole number"


# =============================================================================
# Subscription Tests
# =============================================================================

class TestSubscriptionPlan:
    """SUBSCRIPTION needs bank details; frequency is fixed."""

    def test_bank_errors_reported_separately(self):
        result = validate_plan_selection(
            PlanType.SUBSCRIPTION,
            bank=BankSelection(bank_code="", account_number="123"),
        )

        assert len(result.errors) == 2
        assert result.error_for("bank_code") is not None
        assert result.error_for("account_number") is not None

    def test_frequency_forced_monthly(self):
        result = validate_plan_selection(
            "subscription",
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="WEEKLY", count=6),
        )

        assert result.is_valid
        assert result.request.frequency == Frequency.MONTHLY
        assert result.request.number_of_payments is None

    def test_missing_bank(self):
        result = validate_plan_selection(PlanType.SUBSCRIPTION)
        assert [e.field for e in result.errors] == ["bank_code", "account_number"]


# =============================================================================
# Bank Detail Tests
# =============================================================================

class TestBankDetails:
    """Bank code and account number rules."""

    @pytest.mark.parametrize(
        "account_number",
        ["012345678", "01234567890", "01234abcde", " 012345678", "", "０１２３４５６７８９"],
    )
    def test_invalid_account_numbers(self, account_number):
        result = validate_plan_selection(
            PlanType.SUBSCRIPTION,
            bank=BankSelection(bank_code="058", account_number=account_number),
        )
        assert [e.field for e in result.errors] == ["account_number"]

    def test_blank_bank_code(self):
        result = validate_plan_selection(
            PlanType.SUBSCRIPTION,
            bank=BankSelection(bank_code="   ", account_number="0123456789"),
        )
        assert [e.field for e in result.errors] == ["bank_code"]


class TestUnknownPlanType:
    """Unknown plan types are programming errors, not validation errors."""

    @pytest.mark.parametrize("plan_type", ["LAYAWAY", None, 3])
    def test_raises(self, plan_type):
        with pytest.raises(UnknownPlanTypeException) as exc_info:
            validate_plan_selection(plan_type)

        assert exc_info.value.code == "UNKNOWN_PLAN_TYPE"


# =============================================================================
# Payload Tests
# =============================================================================

class TestPlanPayload:
    """Serialization of normalized requests for the backend."""

    def test_single_payload_omits_absent_fields(self):
        request = validate_plan_selection(PlanType.SINGLE).request
        payload = PlanRequestSchema.from_entity(request, amount=1000).to_payload()

        assert payload == {"paymentType": "SINGLE_PAYMENT", "amount": 1000}

    def test_installment_payload(self):
        request = validate_plan_selection(
            PlanType.INSTALLMENT,
            bank=VALID_BANK,
            installment=InstallmentSelection(frequency="MONTHLY", count=3),
        ).request

        payload = PlanRequestSchema.from_entity(request).to_payload()

        assert payload == {
            "paymentType": "INSTALLMENT",
            "frequency": "MONTHLY",
            "numberOfPayments": 3,
            "bankCode": "058",
            "bankAccountNumber": "0123456789",
        }

    def test_subscription_switch_payload(self):
        request = validate_plan_selection(PlanType.SUBSCRIPTION, bank=VALID_BANK).request

        payload = SwitchPlanRequestSchema.from_entity(request).to_payload()

        assert payload == {
            "newPaymentType": "SUBSCRIPTION",
            "frequency": "MONTHLY",
            "bankCode": "058",
            "bankAccountNumber": "0123456789",
        }
