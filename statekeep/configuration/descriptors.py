"""Tracked property descriptors: a name bound to getter/setter callables."""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from ..errors import BindingError


class _Missing:
    """Sentinel type for "no default specified"."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class TrackedPropertyDescriptor:
    """Accessors and optional default for one tracked attribute."""
    name: str
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]
    is_default_specified: bool = False
    default_value: Any = None


def _resolve_class_attribute(target_type: type, name: str) -> Any:
    """Return the raw class-level attribute for ``name`` or MISSING."""
    for klass in target_type.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return MISSING


def create_descriptor(target: Any, name: str, default: Any = MISSING) -> TrackedPropertyDescriptor:
    """
    Build a descriptor for attribute ``name`` of ``target``.

    The name must resolve to a writable data attribute: an instance
    attribute, a property with a setter, or any other data descriptor.
    Methods and read-only properties are rejected.

    Raises:
        BindingError: If the attribute cannot be tracked
    """
    target_type = type(target)
    type_name = target_type.__name__
    class_attr = _resolve_class_attribute(target_type, name)

    if class_attr is MISSING:
        instance_dict = getattr(target, "__dict__", {})
        if name not in instance_dict:
            raise BindingError(
                f"'{type_name}' has no attribute '{name}'",
                member_name=name,
                target_type=type_name,
            )
    elif isinstance(class_attr, property):
        if class_attr.fset is None:
            raise BindingError(
                f"Property '{type_name}.{name}' is read-only",
                member_name=name,
                target_type=type_name,
            )
    elif inspect.isroutine(class_attr) or isinstance(class_attr, (classmethod, staticmethod)):
        raise BindingError(
            f"'{type_name}.{name}' is a method, not a trackable attribute",
            member_name=name,
            target_type=type_name,
        )

    def getter(obj: Any) -> Any:
        return getattr(obj, name)

    def setter(obj: Any, value: Any) -> None:
        setattr(obj, name, value)

    return TrackedPropertyDescriptor(
        name=name,
        getter=getter,
        setter=setter,
        is_default_specified=default is not MISSING,
        default_value=None if default is MISSING else default,
    )
