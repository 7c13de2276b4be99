"""
Tonbi faults: parse errors, build-time warnings, and how they surface.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue.
- ParseError and its five subclasses, raised by the parser and handed back
  inside a Failed outcome.
- CommandWarning / ShadowedNameWarning, emitted while a command tree is built.
- trigger(fault, **options): the single place deciding between raising,
  warning, and printing.

Every fault keeps its positional message (lowercase, position-first, e.g.
"unknown option '--zzz' at first position") and a read-only `options`
mapping with structured context: input, index, code, title, hint,
suggestions, route, prog, docs and shell.

Shell mode
- options["shell"] false: errors are raised, warnings go through `warnings`.
- options["shell"] true: the fault is printed on standard error through rich
  and, for errors, the process exits with code 1.

Host hooks read from __main__: __codes__ (FaultCode -> label), __docs__
(FaultCode -> text) and __prog__ (program name shown in the header).
"""
import inspect
import sys
import warnings
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


def _host(name, default, /):
    return getattr(sys.modules.get("__main__"), name, default)


class FaultCode(IntEnum):
    """
    stable fault identifiers.

    1111x: option switches, 1112x: positional values, 12xxx: build warnings.
    """
    UNKNOWN_OPTION              = 11112
    UNKNOWN_SHORT_OPTION        = 11113
    MISSING_OPTION_VALUE        = 11117

    UNKNOWN_ARGUMENT            = 11121
    MISSING_REQUIRED_ARGUMENT   = 11125

    SHADOWED_NAME               = 12113

    def normalize(self):
        """
        label shown for this code: the host's __codes__ entry, else the number.
        """
        return str(_host("__codes__", {}).get(self, self.value))


class _Fault:
    """
    message + options carrier shared by errors and warnings.
    """

    def __init__(self, message=Unset, /, **options):
        if not isinstance(message, str | Unset):
            raise TypeError("fault message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        prog = _host("__prog__", self.options.get("prog") or "tonbi")
        header = Text.assemble("[ ", str(prog))
        if code := self.options.get("code"):
            header.append(" — " + code.normalize())
        if title := self.options.get("title"):
            header.append(" | " + title.title())
        header.append(" ]")

        lines = [header, Text(str(self.message))]
        if hint := self.options.get("hint"):
            lines.append(Text(" → " + str(hint)))
        return Group(*lines)

    def __replace__(self, /, **overrides):
        return type(self)(self.message, **(dict(self.options) | overrides))


class ParseError(_Fault, Exception):
    """
    base class of every parse failure.

    the message is the sole user-facing diagnostic; options are for
    renderers and callers inspecting the failure.
    """

    @property
    def input(self):
        """the offending option name, short character, or token."""
        return self.options.get("input")

    @property
    def index(self):
        """1-based position of the offending token (None when not positional)."""
        return self.options.get("index")

    @property
    def code(self):
        return self.options.get("code")

    @property
    def hint(self):
        return self.options.get("hint")

    @property
    def suggestions(self):
        return tuple(self.options.get("suggestions", ()))

    def __trigger__(self):
        if self.options.get("shell"):
            console.print(self, soft_wrap=True)
            sys.exit(1)
        raise self from None


class UnknownOptionError(ParseError): ...
class UnknownShortOptionError(ParseError): ...
class MissingOptionValueError(ParseError): ...
class UnknownArgumentError(ParseError): ...
class MissingRequiredArgumentError(ParseError): ...


class CommandWarning(_Fault, Warning):
    def __trigger__(self):
        if self.options.get("shell"):
            console.print(self, soft_wrap=True)
        else:
            warnings.warn(self, stacklevel=len(inspect.stack()))


class ShadowedNameWarning(CommandWarning): ...


def trigger(fault, /, **options):
    """
    surface `fault` after merging `options` into it (via __replace__).

    errors are raised or printed-and-exited, warnings are warned or printed,
    depending on the merged options["shell"].
    """
    for method in ("__trigger__", "__replace__"):
        if not callable(getattr(fault, method, None)):
            raise TypeError("trigger() argument must define __trigger__ and __replace__")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    the host's __docs__ entry for `code`, or None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault code")
    return _host("__docs__", {}).get(code)


__all__ = (
    "ParseError",
    "UnknownOptionError",
    "UnknownShortOptionError",
    "MissingOptionValueError",
    "UnknownArgumentError",
    "MissingRequiredArgumentError",
    "CommandWarning",
    "ShadowedNameWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
