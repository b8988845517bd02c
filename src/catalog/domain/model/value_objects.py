"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def _measure(value: str | float | int | Decimal | None, label: str) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    if result < 0:
        raise ValidationError(f"{label.capitalize()} cannot be negative, got {result}")
    return result


@dataclass(frozen=True)
class Dimensions:
    """Physical size and weight of a variant. Every measure is optional."""

    weight: Decimal | None = None
    height: Decimal | None = None
    width: Decimal | None = None
    depth: Decimal | None = None

    @staticmethod
    def of(
        weight: str | float | int | Decimal | None = None,
        height: str | float | int | Decimal | None = None,
        width: str | float | int | Decimal | None = None,
        depth: str | float | int | Decimal | None = None,
    ) -> Dimensions:
        return Dimensions(
            weight=_measure(weight, "weight"),
            height=_measure(height, "height"),
            width=_measure(width, "width"),
            depth=_measure(depth, "depth"),
        )

    def replace(self, **changes: str | float | int | Decimal | None) -> Dimensions:
        """Return a copy with the given measures changed."""
        current = {
            "weight": self.weight,
            "height": self.height,
            "width": self.width,
            "depth": self.depth,
        }
        for key, value in changes.items():
            if key not in current:
                raise ValidationError(f"Unknown dimension '{key}'")
            current[key] = value
        return Dimensions.of(**current)
