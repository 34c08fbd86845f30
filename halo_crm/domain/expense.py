"""Expense and bonus income entities."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

ExpenseCategory = Literal["Supplies", "Rent", "Marketing", "Other"]


def _to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass
class Expense:
    """Money spent by the business."""

    id: str
    name: str
    amount: Decimal
    date: str
    category: ExpenseCategory = "Other"

    @classmethod
    def from_dict(cls, data: dict) -> "Expense":
        return cls(
            id=data["id"],
            name=data["name"],
            amount=_to_decimal(data["amount"]),
            date=data["date"],
            category=data.get("category") or "Other",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "date": self.date,
            "category": self.category,
        }


@dataclass
class BonusEntry:
    """Income that did not come from an appointment (tips, gift cards)."""

    id: str
    description: str
    amount: Decimal
    date: str

    @classmethod
    def from_dict(cls, data: dict) -> "BonusEntry":
        return cls(
            id=data["id"],
            description=data["description"],
            amount=_to_decimal(data["amount"]),
            date=data["date"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "date": self.date,
        }
