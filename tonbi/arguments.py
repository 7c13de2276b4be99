r"""
Tonbi argument specifications.

Overview
- Arg: declaration of one argument owned by a command. Depending on its
  metadata an Arg is
  • a flag: presence-only option, e.g. --enthusiastic / -e,
  • a valued option: consumes the following token, e.g. --name Ada / -n Ada,
  • a positional value: assigned from bare tokens in declaration order.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes
    the fields listed in __introspectable__ as read-only properties.

Metadata (sanitized on construction)
- name: non-empty str, the key used in matches and in the long form "--name".
- descr: str, display text for help (may be empty).
- required: bool, enforced by the parser at the end of the owning level.
- takes_value: bool, a named argument consumes the next token as its value.
- short: None | single character alias for the "-c" form (Unset and None mean no alias).
- positional: bool, matched by position rather than by "--name"/"-c".

Arg instances are immutable once built. Use copy.replace(arg, **changes)
(or arg.__replace__(**changes)) to derive a modified copy.

Quick example:
    >>> from tonbi.arguments import Arg
    >>> name = Arg("name", "Name of the person to greet", short="n", takes_value=True)
    >>> loud = Arg("enthusiastic", "Add excitement to the greeting", short="e")
    >>> file = Arg("file", "File to display", required=True, positional=True)

Public API
- Classes: Arg
"""
from .utils import *


class ArgumentType(type):
    """
    Metaclass of Arg.

    Fields listed in __introspectable__ become read-only properties and
    instances render as `arg(name=..., descr=..., ...)` (see utils.introspect).
    """

    def __init__(cls, name, bases, namespace, **options):
        super().__init__(name, bases, namespace, **options)
        introspect(cls)


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate Arg metadata in place.

    Raises
    - TypeError: when 'name', 'descr' or 'short' have the wrong type.
    - ValueError: when 'name' is empty after trimming, or 'short' is not a
      single usable character.

    Notes
    - Cross-argument invariants (unique names/shorts within a command) are
      not checked here; the owning Command resolves them first-match-wins.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name.strip():
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")

    if not isinstance(metadata["descr"], str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")

    if not isinstance(short := metadata["short"], str | None | Unset):
        raise TypeError(f"{cls.__typename__} 'short' must be a string")
    elif isinstance(short, str) and (len(short) != 1 or short == "-" or short.isspace()):
        raise ValueError(f"{cls.__typename__} 'short' must be a single character other than '-'")
    metadata["short"] = coalesce(short)

    for flag in ("required", "takes_value", "positional"):
        metadata[flag] = bool(metadata[flag])


class Arg(metaclass=ArgumentType):
    """
    Declaration of one flag, valued option, or positional value.

    Properties
    - The names listed in __introspectable__ are exposed as read-only
      attributes mirroring the sanitized metadata values.
    """

    __introspectable__ = (
        "name",
        "descr",
        "required",
        "takes_value",
        "short",
        "positional",
    )

    __slots__ = tuple("_" + name for name in __introspectable__)

    def __init__(
            self,
            name,
            descr="",
            /,
            *,
            required=False,
            takes_value=False,
            short=Unset,
            positional=False
    ):
        """
        Construct an Arg spec with the provided metadata.

        Parameters
        - name: str
          Key of the argument inside its command; long form is "--<name>".
        - descr: str
          Short description shown in help.
        - required: bool
          The parser reports a missing-required fault when the argument was
          not matched at its level.
        - takes_value: bool
          Named arguments only: consume the next token as the value.
        - short: Unset | None | str
          Single-character alias for the "-c" form.
        - positional: bool
          Match by bare-token position instead of by name.
        """
        metadata = {
            "name": name,
            "descr": descr,
            "required": required,
            "takes_value": takes_value,
            "short": short,
            "positional": positional,
        }
        _sanitize_metadata(type(self), metadata)

        # Mirror sanitized metadata into private slots; read-only properties expose them.
        for name, object in metadata.items():
            super().__setattr__("_" + name, object)

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__typename__} is immutable once built")

    def __eq__(self, other, /):
        if not isinstance(other, Arg):
            return NotImplemented
        return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash(tuple(self.__rich_repr__()))

    def __replace__(self, /, **changes):
        """
        Return a new Arg with the given fields replaced (copy.replace protocol).
        """
        metadata = dict(self.__rich_repr__()) | changes
        return type(self)(metadata.pop("name"), metadata.pop("descr"), **metadata)


__all__ = (
    "Arg",
)

# Internal; not part of the public API.
del ArgumentType
