"""Order side shared by the order and event models."""

from enum import Enum


class OrderType(str, Enum):
    """Side of a stock order.

    A BUY order is matched against SELL orders of the same enterprise
    when a trade is executed.
    """
    BUY = "buy"
    SELL = "sell"

    def opposite(self) -> "OrderType":
        """Return the side a matching order must have."""
        return OrderType.SELL if self is OrderType.BUY else OrderType.BUY

    @classmethod
    def from_str(cls, side: str) -> "OrderType":
        """
        Parse an order side string ("buy"/"BUY"/"sell"/...).
        """
        normalised = str(side).strip().lower()
        if normalised == "buy":
            return OrderType.BUY
        elif normalised == "sell":
            return OrderType.SELL
        else:
            raise ValueError(f"Invalid order side {side!r}: must be BUY or SELL")
