# examples/stockholder_notifications.py
"""Deliver order book events to the stockholders and enterprises they concern."""
import asyncio
import logging

from stockmarket import (
    DispatcherConfig,
    EventDispatcher,
    OrderType,
    StockEvent,
    StockOrder,
    Stockholder,
    Stocks,
    configure_logging,
    create_added_stock_order_event,
    create_traded_stock_order_event,
)

log = logging.getLogger(__name__)


async def main() -> None:
    config = DispatcherConfig.from_raw({"log_deliveries": True, "log_level": "DEBUG"})
    configure_logging(config)
    dispatcher = EventDispatcher(config)

    alice = Stockholder("H1", "Alice")
    bob = Stockholder("H2", "Bob")

    def notify_alice(event: StockEvent) -> None:
        log.info("Alice: %s", event.to_json())

    async def notify_acme_watchers(event: StockEvent) -> None:
        log.info("Acme watchers: %s event", event.event_type.value)

    dispatcher.subscribe(StockEvent, notify_alice, holder=alice)
    dispatcher.subscribe(StockEvent, notify_acme_watchers, enterprise="Acme")

    # The order book would raise these as orders come and go
    book = object()
    buy = StockOrder(OrderType.BUY, alice, Stocks("Acme", 100, 12.5), 12.5, "O1")
    sell = StockOrder(OrderType.SELL, bob, Stocks("ACME ", 100, 12.0), 12.0, "O2")

    await dispatcher.publish(create_added_stock_order_event(buy, book))
    await dispatcher.publish(create_added_stock_order_event(sell, book))
    await dispatcher.publish(
        create_traded_stock_order_event(buy, sell, Stocks("Acme", 100, 12.25), book)
    )


if __name__ == "__main__":
    asyncio.run(main())
