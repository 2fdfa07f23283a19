"""Directory of banks that can hold a debit mandate."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Bank:
    name: str
    code: str


NIGERIAN_BANKS: Tuple[Bank, ...] = (
    Bank("Access Bank", "044"),
    Bank("Citibank Nigeria", "023"),
    Bank("Ecobank Nigeria", "050"),
    Bank("Fidelity Bank", "070"),
    Bank("First Bank of Nigeria", "011"),
    Bank("First City Monument Bank", "214"),
    Bank("Globus Bank", "103"),
    Bank("Guaranty Trust Bank", "058"),
    Bank("Heritage Bank", "030"),
    Bank("Keystone Bank", "082"),
    Bank("Polaris Bank", "076"),
    Bank("Providus Bank", "101"),
    Bank("Stanbic IBTC Bank", "221"),
    Bank("Standard Chartered Bank", "068"),
    Bank("Sterling Bank", "232"),
    Bank("Titan Trust Bank", "102"),
    Bank("Union Bank of Nigeria", "032"),
    Bank("United Bank for Africa", "033"),
    Bank("Unity Bank", "215"),
    Bank("Wema Bank", "035"),
    Bank("Zenith Bank", "057"),
)

_BY_CODE = {bank.code: bank for bank in NIGERIAN_BANKS}


def get_bank(code: str) -> Optional[Bank]:
    """Bank for a CBN code, or None if the code is not listed."""
    return _BY_CODE.get(code.strip())


def get_bank_name(code: str) -> str:
    """Display name for a bank code, falling back to the code itself."""
    bank = get_bank(code)
    return bank.name if bank else code
