"""
Persist-trigger subscriptions.

A trigger is a standing subscription to a named event on some source object.
The event is resolved by attribute name at registration time and the
resulting unsubscribe callable is kept in a :class:`TriggerSubscription`
so the owner can tear the binding down later.
"""

import weakref
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ..errors import BindingError
from .events import Handler


@runtime_checkable
class PersistRequestSource(Protocol):
    """Target capability: an event fired when the target wants to be persisted."""

    persist_requested: Any


@dataclass(frozen=True)
class TriggerSubscription:
    """One registered trigger and the means to remove it."""
    source_ref: Callable[[], Optional[Any]]
    event_name: str
    handler: Handler
    unsubscribe: Callable[[], None]

    @property
    def source(self) -> Optional[Any]:
        """The event source, or None if it has been collected."""
        return self.source_ref()


def _reference(source: Any) -> Callable[[], Optional[Any]]:
    try:
        return weakref.ref(source)
    except TypeError:
        return lambda: source


def subscribe_to_event(source: Any, event_name: str, handler: Handler) -> TriggerSubscription:
    """
    Attach ``handler`` to the event called ``event_name`` on ``source``.

    Both the package :class:`~statekeep.configuration.events.Event`
    (``subscribe``) and signal objects exposing ``connect``/``disconnect``
    are accepted.

    Raises:
        BindingError: If ``source`` has no such event
    """
    type_name = type(source).__name__
    try:
        source_event = getattr(source, event_name)
    except AttributeError:
        raise BindingError(
            f"'{type_name}' has no event '{event_name}'",
            member_name=event_name,
            target_type=type_name,
        ) from None

    subscribe = getattr(source_event, "subscribe", None)
    connect = getattr(source_event, "connect", None)

    if callable(subscribe):
        unsubscribe = subscribe(handler)
        if not callable(unsubscribe):
            unsubscriber = getattr(source_event, "unsubscribe", None) or (lambda _handler: None)
            unsubscribe = lambda: unsubscriber(handler)  # noqa: E731
    elif callable(connect):
        connect(handler)
        disconnect = getattr(source_event, "disconnect", None) or (lambda _handler: None)
        unsubscribe = lambda: disconnect(handler)  # noqa: E731
    else:
        raise BindingError(
            f"'{type_name}.{event_name}' is not an event",
            member_name=event_name,
            target_type=type_name,
        )

    return TriggerSubscription(
        source_ref=_reference(source),
        event_name=event_name,
        handler=handler,
        unsubscribe=unsubscribe,
    )
