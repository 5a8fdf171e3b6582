from dataclasses import dataclass
from typing import Any

from stockmarket.types import OrderType

from .stockholder import Stockholder
from .stocks import Stocks


@dataclass(frozen=True)
class StockOrder:
    """
    A buy or sell request for a lot of an enterprise's shares.

    Attributes:
        order_type: BUY or SELL.
        order_placer: The stockholder who placed the order, or ``None`` if unknown.
        stocks: The lot being bought or sold, or ``None`` if unknown.
        price: Limit price per share.
        order_id: Identifier assigned by the order book (empty until assigned).
    """

    order_type: OrderType
    order_placer: Stockholder | None
    stocks: Stocks | None
    price: float = 0.0
    order_id: str = ""

    @property
    def enterprise(self) -> str | None:
        """Enterprise of the ordered lot, or ``None`` when the lot is absent."""
        if self.stocks is None:
            return None
        return self.stocks.enterprise

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_type": self.order_type.value,
            "order_placer": self.order_placer.to_dict() if self.order_placer else None,
            "stocks": self.stocks.to_dict() if self.stocks else None,
            "price": self.price,
            "order_id": self.order_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StockOrder":
        try:
            order_type = OrderType.from_str(data["order_type"])
            placer = data.get("order_placer")
            stocks = data.get("stocks")
            return cls(
                order_type=order_type,
                order_placer=Stockholder.from_dict(placer) if placer is not None else None,
                stocks=Stocks.from_dict(stocks) if stocks is not None else None,
                price=float(data.get("price", 0.0)),
                order_id=str(data.get("order_id") or ""),
            )
        except KeyError as exc:
            raise ValueError("order.order_type is missing") from exc
        except (AttributeError, TypeError) as exc:
            raise ValueError(f"order record is malformed: {data!r}") from exc
