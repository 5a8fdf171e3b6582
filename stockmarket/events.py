import asyncio
import logging
from abc import ABC
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Awaitable, Callable

from stockmarket.config import DispatcherConfig
from stockmarket.time_utils import now_utc

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None | Awaitable[None]]


def event(cls):
    return dataclass(frozen=True, slots=True)(cls)


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainEvent(ABC):
    timestamp: datetime = field(default_factory=now_utc)


@dataclass(frozen=True)
class Subscription:
    """A handler plus the optional filters narrowing what it receives."""

    handler: Handler
    holder: Any = None
    enterprise: str | None = None

    def accepts(self, event: DomainEvent) -> bool:
        if self.holder is not None and not event.is_participant(self.holder):
            return False
        if self.enterprise is not None and not event.is_from_enterprise(self.enterprise):
            return False
        return True


def _handler_name(handler: Callable) -> str:
    return getattr(handler, "__name__", repr(handler))


class EventDispatcher:
    """Async event dispatcher for domain events.

    Handlers can be sync or async functions. A handler subscribed to a base
    class receives every subclass of it, so subscribing to ``StockEvent``
    delivers added, removed, updated and traded notifications alike.
    Exceptions in handlers are logged but don't stop dispatch to other
    handlers, unless the config asks for them to be raised.
    """

    def __init__(self, config: DispatcherConfig | None = None):
        self._config = config or DispatcherConfig()
        self._handlers: dict[type[DomainEvent], list[Subscription]] = defaultdict(list)

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Handler,
        *,
        holder: Any = None,
        enterprise: str | None = None,
    ) -> Subscription:
        """Register a handler for an event type.

        Args:
            event_type: The event class (or base class) to subscribe to
            handler: Sync or async callable that accepts the event
            holder: Only deliver events this stockholder took part in
            enterprise: Only deliver events concerning this enterprise

        Raises:
            TypeError: If a filter is given for an event type that does not
                support stockholder/enterprise queries.
        """
        if holder is not None and not callable(getattr(event_type, "is_participant", None)):
            raise TypeError(f"{event_type.__name__} cannot be filtered by stockholder")
        if enterprise is not None and not callable(
            getattr(event_type, "is_from_enterprise", None)
        ):
            raise TypeError(f"{event_type.__name__} cannot be filtered by enterprise")

        subscription = Subscription(handler=handler, holder=holder, enterprise=enterprise)
        self._handlers[event_type].append(subscription)
        return subscription

    def unsubscribe(self, event_type: type[DomainEvent], handler: Callable):
        """Unregister every subscription of a handler under an event type."""
        subscriptions = self._handlers.get(event_type)
        if not subscriptions:
            return
        subscriptions[:] = [s for s in subscriptions if s.handler != handler]

    def handlers_for(self, event_type: type[DomainEvent]) -> list[Callable]:
        """Handlers registered directly under an event type."""
        return [s.handler for s in self._handlers.get(event_type, ())]

    async def publish(self, event: DomainEvent) -> int:
        """Dispatch event to all matching handlers.

        Handlers are called sequentially (await each), most-derived event
        type first and in subscription order within a type.

        Args:
            event: The domain event to dispatch

        Returns:
            The number of handlers invoked.
        """
        invoked = 0
        for event_type in type(event).__mro__:
            for subscription in list(self._handlers.get(event_type, ())):
                if not subscription.accepts(event):
                    continue

                handler = subscription.handler
                invoked += 1
                if self._config.log_deliveries:
                    logger.debug(
                        "Delivering %s to %s",
                        event.__class__.__name__,
                        _handler_name(handler),
                    )
                try:
                    result = handler(event)
                    if asyncio.iscoroutine(result):
                        await result
                except Exception as e:
                    if self._config.raise_handler_errors:
                        raise
                    logger.error(
                        f"Event handler {_handler_name(handler)} failed for {event.__class__.__name__}: {e}",
                        exc_info=True,
                    )
        return invoked


# Lazy singleton
_dispatcher: EventDispatcher | None = None


def get_dispatcher() -> EventDispatcher:
    """Get the global event dispatcher instance."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = EventDispatcher()
    return _dispatcher
