"""
Tagged parse outcomes.

parse() never prints and never ends the process; it returns exactly one of

- Matched(matches)                 parsing succeeded,
- HelpRequested(command, text)     --help / -h was seen (text is the rendered help),
- VersionRequested(command, text)  --version / -V was seen (text is None without a version),
- Failed(fault)                    the first ParseError encountered at any level,

so the embedding program decides how to react:

    match parse(app, tokens):
        case Matched(matches):
            ...
        case HelpRequested(text=text) | VersionRequested(text=text):
            print(text or "")
        case Failed(fault):
            ...

Every outcome exposes the conventional process exit code as `exitcode`.
"""
from collections import namedtuple


class Matched(namedtuple("Matched", ("matches",))):
    __slots__ = ()

    exitcode = 0

    def unwrap(self):
        return self.matches


class HelpRequested(namedtuple("HelpRequested", ("command", "text"))):
    __slots__ = ()

    exitcode = 0


class VersionRequested(namedtuple("VersionRequested", ("command", "text"))):
    __slots__ = ()

    exitcode = 0


class Failed(namedtuple("Failed", ("fault",))):
    __slots__ = ()

    exitcode = 1

    def unwrap(self):
        """Raise the fault carried by this outcome."""
        raise self.fault


__all__ = (
    "Matched",
    "HelpRequested",
    "VersionRequested",
    "Failed",
)
