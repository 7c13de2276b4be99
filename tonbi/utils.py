"""
Small helpers shared by the tonbi modules.

- Unset: "not provided" marker, distinct from None (falsy, sealed, one instance).
- coalesce(value, default): swap Unset for a default and keep every other value.
- rename(...): give generated callables a readable __name__/__qualname__.
- mirror(name): read-only property over "self._<name>".
- ordinal(n): "first", "second", ..., "11th", "21st" for position-first messages.
- introspect(cls): read-only fields and keyword-style reprs for spec classes.
"""
import functools
import re
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import final

_WORDS = (
    "first", "second", "third", "fourth", "fifth",
    "sixth", "seventh", "eighth", "ninth", "tenth",
)


@final
class UnsetType:
    """
    Type of the Unset marker.

    Only one instance ever exists; calling UnsetType() hands it back.
    It is falsy, prints as "Unset" and joins `|` unions with real types,
    so `str | Unset` can be used in isinstance() checks.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __init_subclass__(cls, **options):
        raise TypeError("UnsetType cannot be subclassed")

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return "Unset"

    def __or__(self, other, /):
        try:
            return UnsetType | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | UnsetType
        except TypeError:
            return NotImplemented


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    `default` when `object` is Unset, otherwise `object` itself (None, 0 and "" included).
    """
    if object is Unset:
        return default
    return object


def _set_name(function, name, /):
    if not callable(function):
        raise TypeError("rename() target must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    try:
        function.__name__ = function.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() target does not accept a new name") from None
    return function


def rename(*parameters):
    """
    rename(function, name) renames in place and returns `function`;
    rename(name) returns a decorator doing the same.
    """
    if len(parameters) == 2:
        return _set_name(*parameters)
    if len(parameters) != 1:
        raise TypeError("rename() expects 1 or 2 arguments, got %d" % len(parameters))

    name = parameters[0]
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    return _decorator(name)


def _decorator(name, /):
    def decorate(function):
        return _set_name(function, name)
    return _set_name(decorate, "rename")


def _view(value):
    match value:
        case str():
            return value
        case Mapping():
            return MappingProxyType(value)
        case Set():
            return frozenset(value)
        case Sequence():
            return tuple(value)
    return value


def mirror(name, /):
    """
    Build a read-only property returning "self._<name>".

    Lists come back as tuples, dicts as MappingProxyType and sets as frozenset,
    so callers cannot change builder state through the public attribute.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")
    attribute = "_" + name

    def getter(self):
        return _view(getattr(self, attribute))

    return property(_set_name(getter, name))


def typename(name, /):
    """
    Hyphenated lowercase form of a class name used in reprs and messages:
    "ArgMatches" -> "arg-matches".
    """
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", name).lower()


def _rich_repr(self):
    for field in type(self).__displayable__:
        yield field, getattr(self, field)


def _repr(self):
    fields = ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
    return f"{type(self).__typename__}({fields})"


def introspect(cls, /):
    """
    Finish a spec class in place and return it.

    - __typename__ is derived from the class name.
    - every name in __introspectable__ becomes a mirror() property.
    - __rich_repr__ yields the __displayable__ fields (defaulting to all
      introspectable ones) and __repr__ renders them as keywords.
    """
    cls.__typename__ = typename(cls.__name__)
    for field in cls.__dict__.get("__introspectable__", ()):
        setattr(cls, field, mirror(field))
    if "__displayable__" not in cls.__dict__:
        cls.__displayable__ = cls.__introspectable__
    cls.__rich_repr__ = _set_name(_rich_repr, "__rich_repr__")
    cls.__repr__ = _set_name(_repr, "__repr__")
    return cls


@functools.cache
def ordinal(number, /):
    """
    Ordinal label of a 1-based position.
    """
    if 1 <= number <= len(_WORDS):
        return _WORDS[number - 1]
    if number % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "ordinal",
    "typename",
    "introspect",
    "UnsetType",
    "Unset",
)
