from .order import StockOrder
from .stock_event import (
    StockEvent,
    StockEventType,
    StockOrderAdded,
    StockOrderRemoved,
    StockOrderUpdated,
    StockTraded,
    create_added_stock_order_event,
    create_removed_stock_order_event,
    create_traded_stock_order_event,
    create_updated_stock_order_event,
)
from .stockholder import Stockholder
from .stocks import Stocks

__all__ = [
    "StockEvent",
    "StockEventType",
    "StockOrder",
    "StockOrderAdded",
    "StockOrderRemoved",
    "StockOrderUpdated",
    "StockTraded",
    "Stockholder",
    "Stocks",
    "create_added_stock_order_event",
    "create_removed_stock_order_event",
    "create_traded_stock_order_event",
    "create_updated_stock_order_event",
]
