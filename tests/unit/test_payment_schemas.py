"""
Unit Tests for backend payment schemas.

These tests verify:
1. camelCase backend records parse into PaymentRecord entities
2. Absent optional fields stay None rather than becoming zero
3. Payment type normalization and virtual account shapes
4. Malformed payloads surface as SnapshotFetchException
"""

import pytest

from fee_engine.domain.entities import PlanType
from fee_engine.domain.exceptions import SnapshotFetchException
from fee_engine.presentation.schemas import (
    PaymentRecordSchema,
    payments_from_api,
    snapshot_from_api,
)
from fee_engine.service.billing import resolve_display_amount


def backend_payment(**overrides) -> dict:
    payment = {
        "id": 42,
        "description": "First term school fees",
        "amount": 1000,
        "paymentType": "INSTALLMENT",
        "status": "PENDING",
        "downPayment": 200,
        "customerAccountNumber": "0123456789",
    }
    payment.update(overrides)
    return payment


class TestPaymentRecordSchema:
    """Tests for PaymentRecordSchema.to_entity()."""

    def test_camel_case_fields(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(remainingAmount=600, completedPayments=2, numberOfPayments=4)
        ).to_entity()

        assert record.id == "42"
        assert record.payment_type == PlanType.INSTALLMENT
        assert record.down_payment == 200
        assert record.remaining_amount == 600
        assert record.completed_payments == 2
        assert record.number_of_payments == 4
        assert record.customer_account_number == "0123456789"

    def test_absent_fields_stay_none(self):
        record = PaymentRecordSchema.model_validate(backend_payment()).to_entity()

        assert record.remaining_amount is None
        assert record.completed_payments is None
        assert record.virtual_account is None

    def test_absence_changes_precedence(self):
        """An absent remaining balance lets the down payment show."""
        absent = payments_from_api([backend_payment()])[0]
        present = payments_from_api([backend_payment(remainingAmount=0)])[0]

        assert resolve_display_amount(absent).amount == 200
        assert resolve_display_amount(present).amount == 0

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("SINGLE_PAYMENT", PlanType.SINGLE),
            ("one_time", PlanType.SINGLE),
            ("subscription", PlanType.SUBSCRIPTION),
            ("INSTALLMENT_PLAN", PlanType.INSTALLMENT),
            ("ITEM_PAYMENT", PlanType.SINGLE),
            (None, PlanType.SINGLE),
        ],
    )
    def test_payment_type_normalization(self, raw, expected):
        record = PaymentRecordSchema.model_validate(backend_payment(paymentType=raw)).to_entity()
        assert record.payment_type == expected

    def test_flat_virtual_account(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(
                accountNumber="9900112233",
                bankName="Providus Bank",
                accountName="School / Ada Obi",
                expiryDate="2026-10-20T12:00:00Z",
            )
        ).to_entity()

        assert record.virtual_account.number == "9900112233"
        assert record.virtual_account.bank_name == "Providus Bank"
        assert record.virtual_account.expiry_date == "2026-10-20T12:00:00Z"

    def test_nested_virtual_account(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(
                virtualAccount={"accountNumber": "9900112233", "bankName": "Wema Bank"},
                virtualAccountNumber="1111111111",
            )
        ).to_entity()

        assert record.virtual_account.number == "9900112233"
        assert record.virtual_account.bank_name == "Wema Bank"

    def test_prefixed_virtual_account_fields(self):
        """Payment-detail records prefix every virtual account field."""
        record = PaymentRecordSchema.model_validate(
            backend_payment(
                virtualAccountNumber="9900112233",
                virtualAccountBankName="Providus Bank",
                virtualAccountName="School / Ada Obi",
                virtualAccountExpiryDate="2026-10-20T12:00:00Z",
            )
        ).to_entity()

        assert record.virtual_account.number == "9900112233"
        assert record.virtual_account.bank_name == "Providus Bank"
        assert record.virtual_account.account_name == "School / Ada Obi"
        assert record.virtual_account.expiry_date == "2026-10-20T12:00:00Z"

    def test_number_of_installments_fallback(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(numberOfInstallments=3, completedPayments=1)
        ).to_entity()

        assert record.number_of_payments == 3
        assert resolve_display_amount(record).installment_progress == pytest.approx(1 / 3)

    def test_number_of_payments_preferred_over_installments(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(numberOfPayments=4, numberOfInstallments=3)
        ).to_entity()

        assert record.number_of_payments == 4

    def test_null_status_and_description(self):
        record = PaymentRecordSchema.model_validate(
            backend_payment(status=None, description=None)
        ).to_entity()

        assert record.status == ""
        assert record.description == ""


class TestSnapshotFromApi:
    """Tests for snapshot_from_api()."""

    def test_builds_snapshot(self):
        snapshot = snapshot_from_api(
            [{"id": 7, "firstName": "Ada", "surname": "Obi", "pendingAmount": 800}],
            [backend_payment(), backend_payment(id=43, status="SUCCESSFUL")],
        )

        assert len(snapshot.payments) == 2
        assert isinstance(snapshot.payments, tuple)
        child = snapshot.children[0]
        assert child.id == "7"
        assert child.name == "Ada Obi"
        assert child.pending_amount == 800

    def test_malformed_payment_raises(self):
        broken = backend_payment()
        del broken["amount"]

        with pytest.raises(SnapshotFetchException) as exc_info:
            snapshot_from_api([], [broken])

        assert exc_info.value.code == "SNAPSHOT_FETCH_FAILED"

    def test_non_list_payload_raises(self):
        with pytest.raises(SnapshotFetchException):
            snapshot_from_api({"children": []}, [])
