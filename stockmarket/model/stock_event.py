"""Notifications raised by the order book.

A ``StockEvent`` is emitted when a stock order is added, removed or updated
and when a buy and a sell order trade. Each kind is its own frozen event
class carrying only the orders relevant to it, so an "added" event can never
hold a trade's buy order by mistake.

The ``observable`` attribute identifies the object that raised the event.
It is bookkeeping for the publisher and is left out of equality, ``repr``
and the serialized form.
"""

import json
import logging
from abc import abstractmethod
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar

from stockmarket.events import DomainEvent, event
from stockmarket.time_utils import format_timestamp, parse_timestamp

from .order import StockOrder
from .stockholder import Stockholder
from .stocks import Stocks

log = logging.getLogger(__name__)

__all__ = [
    "PAYLOAD_FIELDS",
    "StockEvent",
    "StockEventType",
    "StockOrderAdded",
    "StockOrderRemoved",
    "StockOrderUpdated",
    "StockTraded",
    "create_added_stock_order_event",
    "create_removed_stock_order_event",
    "create_traded_stock_order_event",
    "create_updated_stock_order_event",
]


PAYLOAD_FIELDS = ("new_order", "prev_order", "buy_order", "sell_order", "traded_stock")


class StockEventType(str, Enum):
    """Kind of change a stock event reports."""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    TRADED = "traded"


@dataclass(frozen=True, slots=True, kw_only=True)
class StockEvent(DomainEvent):
    """Base of the four stock event kinds.

    Use the ``create_*`` factories to build events. Subclasses fix
    ``event_type`` at class level and implement :meth:`relevant_orders`.
    """

    event_type: ClassVar[StockEventType]
    observable: Any = field(default=None, repr=False, compare=False)

    @abstractmethod
    def relevant_orders(self) -> tuple[StockOrder | None, ...]:
        """Orders consulted by :meth:`is_participant` and :meth:`is_from_enterprise`."""
        ...

    def is_participant(self, holder: Stockholder | None) -> bool:
        """
        Check whether a stockholder placed one of the orders behind this event.

        Args:
            holder: Stockholder to look for. ``None`` never participates.

        Returns:
            True if any relevant order was placed by ``holder``.
        """
        if holder is None:
            return False
        return any(
            order is not None and holder == order.order_placer
            for order in self.relevant_orders()
        )

    def is_from_enterprise(self, enterprise: str | None) -> bool:
        """
        Check whether this event concerns shares of an enterprise.

        Names are compared case-insensitively with surrounding whitespace
        ignored. An order whose lot or enterprise name is missing never
        matches.

        Args:
            enterprise: Enterprise name. ``None`` or ``""`` never matches.

        Returns:
            True if any relevant order trades shares of ``enterprise``.
        """
        if not enterprise:
            return False

        wanted = enterprise.strip().casefold()
        for order in self.relevant_orders():
            if order is None:
                continue
            name = order.enterprise
            if name is None:
                log.debug(
                    "%s order %r has no enterprise; treating as non-match",
                    self.event_type.value,
                    order.order_id,
                )
                continue
            if name.strip().casefold() == wanted:
                return True
        return False

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; payload keys outside this event's kind are ``None``."""
        data: dict[str, Any] = {
            "event_type": self.event_type.value,
            "timestamp": format_timestamp(self.timestamp),
        }
        for name in PAYLOAD_FIELDS:
            value = getattr(self, name, None)
            data[name] = value.to_dict() if value is not None else None
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any], observable: Any = None) -> "StockEvent":
        """Rebuild an event from :meth:`to_dict` output.

        Args:
            data: Serialized event.
            observable: Triggerer to attach; it is never part of ``data``.

        Raises:
            ValueError: If the event type is missing or unknown, or the
                payload is malformed.
        """
        if data.get("event_type") is None:
            raise ValueError("stock event has no event_type")
        try:
            event_type = StockEventType(str(data["event_type"]).strip().lower())
        except ValueError as exc:
            raise ValueError(f"unknown stock event type {data['event_type']!r}") from exc

        event_cls = _EVENT_CLASSES[event_type]
        if not issubclass(event_cls, cls):
            raise ValueError(
                f"{event_type.value!r} event cannot be decoded as {cls.__name__}"
            )

        payload = {
            f.name: _decode_payload(f.name, data.get(f.name))
            for f in fields(event_cls)
            if f.name in PAYLOAD_FIELDS
        }
        return event_cls(
            **payload,
            timestamp=parse_timestamp(data.get("timestamp") or ""),
            observable=observable,
        )

    @classmethod
    def from_json(cls, text: str, observable: Any = None) -> "StockEvent":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError("stock event is not valid JSON") from exc
        if not isinstance(data, dict):
            raise ValueError("stock event JSON must be an object")
        return cls.from_dict(data, observable=observable)


@event
class StockOrderAdded(StockEvent):
    """A new order entered the book."""

    event_type: ClassVar[StockEventType] = StockEventType.ADDED
    new_order: StockOrder | None

    def relevant_orders(self) -> tuple[StockOrder | None, ...]:
        return (self.new_order,)


@event
class StockOrderRemoved(StockEvent):
    """An order left the book."""

    event_type: ClassVar[StockEventType] = StockEventType.REMOVED
    prev_order: StockOrder | None

    def relevant_orders(self) -> tuple[StockOrder | None, ...]:
        return (self.prev_order,)


@event
class StockOrderUpdated(StockEvent):
    """An order in the book changed from ``prev_order`` to ``new_order``."""

    event_type: ClassVar[StockEventType] = StockEventType.UPDATED
    prev_order: StockOrder | None
    new_order: StockOrder | None

    def relevant_orders(self) -> tuple[StockOrder | None, ...]:
        return (self.new_order,)


@event
class StockTraded(StockEvent):
    """A buy and a sell order were matched for ``traded_stock``."""

    event_type: ClassVar[StockEventType] = StockEventType.TRADED
    buy_order: StockOrder | None
    sell_order: StockOrder | None
    traded_stock: Stocks | None

    def relevant_orders(self) -> tuple[StockOrder | None, ...]:
        return (self.buy_order, self.sell_order)


_EVENT_CLASSES: dict[StockEventType, type[StockEvent]] = {
    cls.event_type: cls
    for cls in (StockOrderAdded, StockOrderRemoved, StockOrderUpdated, StockTraded)
}


def _decode_payload(name: str, value: dict[str, Any] | None) -> StockOrder | Stocks | None:
    if value is None:
        return None
    if name == "traded_stock":
        return Stocks.from_dict(value)
    return StockOrder.from_dict(value)


def create_added_stock_order_event(
    order: StockOrder | None, triggerer: Any = None
) -> StockOrderAdded:
    """
    Create the event for an order entering the book.

    Args:
        order: The new order
        triggerer: Object raising the event

    Returns:
        An ADDED event with ``new_order`` set
    """
    return StockOrderAdded(new_order=order, observable=triggerer)


def create_removed_stock_order_event(
    order: StockOrder | None, triggerer: Any = None
) -> StockOrderRemoved:
    """
    Create the event for an order leaving the book.

    Args:
        order: The removed order
        triggerer: Object raising the event

    Returns:
        A REMOVED event with ``prev_order`` set
    """
    return StockOrderRemoved(prev_order=order, observable=triggerer)


def create_updated_stock_order_event(
    previous_value: StockOrder | None,
    new_value: StockOrder | None,
    triggerer: Any = None,
) -> StockOrderUpdated:
    """
    Create the event for an order changing in the book.

    Args:
        previous_value: The order before the change
        new_value: The order after the change
        triggerer: Object raising the event

    Returns:
        An UPDATED event with ``prev_order`` and ``new_order`` set
    """
    return StockOrderUpdated(
        prev_order=previous_value, new_order=new_value, observable=triggerer
    )


def create_traded_stock_order_event(
    buy_order: StockOrder | None,
    sell_order: StockOrder | None,
    traded_stock: Stocks | None,
    triggerer: Any = None,
) -> StockTraded:
    """
    Create the event for a trade between two orders.

    Args:
        buy_order: The buy side of the trade
        sell_order: The sell side of the trade
        traded_stock: The lot that changed hands
        triggerer: Object raising the event

    Returns:
        A TRADED event with both orders and the traded lot set
    """
    return StockTraded(
        buy_order=buy_order,
        sell_order=sell_order,
        traded_stock=traded_stock,
        observable=triggerer,
    )
