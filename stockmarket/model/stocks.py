from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Stocks:
    """
    A lot of shares of a single enterprise.

    Attributes:
        enterprise: Name of the company the shares belong to. May be ``None``
            for an incomplete record.
        quantity: Number of shares in the lot.
        price: Unit price of a share.
    """

    enterprise: str | None
    quantity: int = 0
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "enterprise": self.enterprise,
            "quantity": self.quantity,
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stocks":
        try:
            enterprise = data.get("enterprise")
            if enterprise is not None and not isinstance(enterprise, str):
                raise TypeError(f"enterprise must be a string, got {enterprise!r}")
            return cls(
                enterprise=enterprise,
                quantity=int(data.get("quantity", 0)),
                price=float(data.get("price", 0.0)),
            )
        except (AttributeError, TypeError, ValueError) as exc:
            raise ValueError(f"stocks record is malformed: {data!r}") from exc
