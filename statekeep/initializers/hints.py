"""
Declarative tracking hints.

Mark attributes on a class so the default initializer can discover them:

    class Window:
        width = Trackable(default=800)
        height = Trackable(default=600)

        @tracking_key
        def name(self):
            return self._name

        @trackable(default="light", tracker_name="ui")
        @property
        def theme(self):
            return self._theme

        @theme.setter
        def theme(self, value):
            self._theme = value
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

from ..configuration.descriptors import MISSING
from ..errors import BindingError


@dataclass(frozen=True)
class TrackableHint:
    """Marks an attribute as trackable, optionally for one tracker only."""
    default: Any = MISSING
    tracker_name: Optional[str] = None

    @property
    def is_default_specified(self) -> bool:
        return self.default is not MISSING

    def applies_to(self, tracker_name: str) -> bool:
        return self.tracker_name is None or self.tracker_name == tracker_name


class Trackable:
    """
    Data descriptor for a plain trackable attribute.

    Values are stored in the instance ``__dict__``. Reading an attribute that
    was never assigned returns the hint's default, or raises AttributeError
    when there is none.
    """

    def __init__(self, default: Any = MISSING, tracker_name: Optional[str] = None):
        self.hint = TrackableHint(default, tracker_name)
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        try:
            return obj.__dict__[self.name]
        except KeyError:
            if self.hint.is_default_specified:
                return self.hint.default
            raise AttributeError(
                f"'{type(obj).__name__}' object has no value for '{self.name}'"
            ) from None

    def __set__(self, obj: Any, value: Any) -> None:
        obj.__dict__[self.name] = value


class TrackableProperty(property):
    """A ``property`` that carries a :class:`TrackableHint`."""

    def __init__(self, fget=None, fset=None, fdel=None, doc=None,
                 hint: Optional[TrackableHint] = None):
        super().__init__(fget, fset, fdel, doc)
        self.hint = hint or TrackableHint()

    def getter(self, fget):
        return type(self)(fget, self.fset, self.fdel, self.__doc__, hint=self.hint)

    def setter(self, fset):
        return type(self)(self.fget, fset, self.fdel, self.__doc__, hint=self.hint)

    def deleter(self, fdel):
        return type(self)(self.fget, self.fset, fdel, self.__doc__, hint=self.hint)


class TrackingKeyProperty(property):
    """A read-only ``property`` whose value identifies the instance."""


def trackable(
    default: Any = MISSING, tracker_name: Optional[str] = None
) -> Callable[[Union[property, Callable]], TrackableProperty]:
    """Decorate a property (or a getter function) as trackable."""
    hint = TrackableHint(default, tracker_name)

    def decorator(obj: Union[property, Callable]) -> TrackableProperty:
        if isinstance(obj, property):
            return TrackableProperty(obj.fget, obj.fset, obj.fdel, obj.__doc__, hint=hint)
        return TrackableProperty(obj, hint=hint)

    return decorator


def tracking_key(obj: Union[property, Callable]) -> TrackingKeyProperty:
    """Decorate a property (or a getter function) as the identifying key."""
    if isinstance(obj, property):
        return TrackingKeyProperty(obj.fget, obj.fset, obj.fdel, obj.__doc__)
    return TrackingKeyProperty(obj)


def _class_attributes(cls: type) -> dict[str, Any]:
    attributes: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        attributes.update(vars(klass))
    return attributes


def iter_trackable_hints(cls: type) -> Iterator[tuple[str, TrackableHint]]:
    """Yield ``(name, hint)`` for every trackable attribute of ``cls``."""
    for name, attribute in _class_attributes(cls).items():
        if isinstance(attribute, (Trackable, TrackableProperty)):
            yield name, attribute.hint


def find_tracking_key(cls: type) -> Optional[str]:
    """
    Return the name of the identifying-key attribute of ``cls``, if any.

    Raises:
        BindingError: If more than one attribute is marked as the key
    """
    names = [
        name for name, attribute in _class_attributes(cls).items()
        if isinstance(attribute, TrackingKeyProperty)
    ]
    if len(names) > 1:
        raise BindingError(
            f"'{cls.__name__}' declares more than one tracking key: {', '.join(names)}",
            member_name=names[1],
            target_type=cls.__name__,
        )
    return names[0] if names else None
