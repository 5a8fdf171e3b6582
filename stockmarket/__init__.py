# stockmarket/__init__.py
"""
Stockmarket - order book notifications for a stock-market web service.

Provides the stock event model (order added, removed, updated and traded),
the order/stock entities it refers to, and an async dispatcher delivering
events to subscribers interested in a stockholder or an enterprise.
"""

from .config import DispatcherConfig
from .events import DomainEvent, EventDispatcher, get_dispatcher
from .logging_config import configure_logging
from .model import (
    StockEvent,
    StockEventType,
    StockOrder,
    Stockholder,
    Stocks,
    create_added_stock_order_event,
    create_removed_stock_order_event,
    create_traded_stock_order_event,
    create_updated_stock_order_event,
)
from .types import OrderType

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DispatcherConfig",
    "DomainEvent",
    "EventDispatcher",
    "OrderType",
    "StockEvent",
    "StockEventType",
    "StockOrder",
    "Stockholder",
    "Stocks",
    "configure_logging",
    "create_added_stock_order_event",
    "create_removed_stock_order_event",
    "create_traded_stock_order_event",
    "create_updated_stock_order_event",
    "get_dispatcher",
]
