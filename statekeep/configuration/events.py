"""Synchronous observer events used for notifications and persist triggers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .tracking import TrackingConfiguration

Handler = Callable[..., Any]


class Event:
    """
    Ordered list of handlers invoked synchronously on ``fire``.

    Handlers are called with whatever arguments ``fire`` receives. Dispatch
    works on a snapshot, so a handler may unsubscribe itself (or others)
    while the event is firing.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> Callable[[], None]:
        """Add ``handler`` and return a callable that removes it again."""
        self._handlers.append(handler)
        return lambda: self.unsubscribe(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """Remove one registration of ``handler``; no-op if not subscribed."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def fire(self, *args: Any, **kwargs: Any) -> None:
        for handler in list(self._handlers):
            handler(*args, **kwargs)

    def __iadd__(self, handler: Handler) -> "Event":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Handler) -> "Event":
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)


class event:
    """
    Declare a per-instance :class:`Event` as a class attribute.

    Example:
        class Editor:
            persist_requested = event()

        editor = Editor()
        editor.persist_requested += on_persist
        editor.persist_requested.fire()
    """

    def __init__(self) -> None:
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.setdefault(self.name, Event())


@dataclass
class TrackingOperationEventArgs:
    """
    Mutable payload handed to applying/persisting hooks.

    Handlers may replace ``value`` or set ``cancel`` to veto the operation
    for this one property.
    """
    configuration: "TrackingConfiguration"
    property_name: str
    value: Any
    cancel: bool = False
