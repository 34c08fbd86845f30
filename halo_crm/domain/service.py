"""Service entity - something the business sells, with a price and duration."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Service:
    """A service offered by the business."""

    id: str
    name: str
    price: Decimal
    duration_minutes: int
    description: Optional[str] = None
    price_per_person: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        """Creates a Service from a dictionary."""
        price = data["price"]
        if not isinstance(price, Decimal):
            price = Decimal(str(price))

        return cls(
            id=data["id"],
            name=data["name"],
            price=price,
            duration_minutes=int(data["duration_minutes"]),
            description=data.get("description"),
            price_per_person=bool(data.get("price_per_person", 0)),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "duration_minutes": self.duration_minutes,
            "description": self.description,
            "price_per_person": self.price_per_person,
        }

    @property
    def price_formatted(self) -> str:
        """Price formatted with currency symbol."""
        suffix = " per person" if self.price_per_person else ""
        return f"${float(self.price):.2f}{suffix}"
