"""
Tonbi parse results.

ArgMatches is the read-only outcome for one command level: a mapping from
argument name to its value (None for presence-only flags) plus at most one
activated child ArgMatches (the subcommand chain).

Presence in the mapping, not a boolean, denotes "matched":

    >>> matches.value_of("name")      # 'Ada' / None
    >>> matches.is_present("loud")    # True / False
    >>> matches.subcommand()          # ('farewell', <ArgMatches>) / None

Callers walk nested chains themselves; there is no flattened view.
"""
from types import MappingProxyType


class ArgMatches:
    """
    Read-only accessor over the values parsed for one command level.

    Instances are produced by the parser; the constructor takes ownership of
    the given mapping and child pair, and nothing mutates them afterwards.
    """

    __slots__ = ("_name", "_values", "_subcommand")

    def __init__(self, name, values=(), subcommand=None, /):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_values", dict(values))
        if subcommand is not None:
            child, matches = subcommand
            if not isinstance(matches, ArgMatches):
                raise TypeError("ArgMatches subcommand must pair a name with an ArgMatches")
            subcommand = (child, matches)
        object.__setattr__(self, "_subcommand", subcommand)

    def __setattr__(self, name, value, /):
        raise AttributeError("ArgMatches is read-only")

    @property
    def name(self):
        """Name of the command these matches were produced for."""
        return self._name

    @property
    def values(self):
        """Read-only view of every matched argument name and its value."""
        return MappingProxyType(self._values)

    def value_of(self, name, /):
        """
        Return the value matched for `name`.

        None when the argument is absent or was matched as a valueless flag.
        The value is returned exactly as it appeared in the token stream.
        """
        return self._values.get(name)

    def is_present(self, name, /):
        """
        Return True when `name` was matched, valued or not.
        """
        return name in self._values

    def subcommand(self):
        """
        Return the activated child as a (name, ArgMatches) pair, or None.
        """
        return self._subcommand

    def __contains__(self, name, /):
        return self.is_present(name)

    def __eq__(self, other, /):
        if not isinstance(other, ArgMatches):
            return NotImplemented
        return (self._name, self._values, self._subcommand) == (other._name, other._values, other._subcommand)

    __hash__ = None

    def __rich_repr__(self):
        yield "name", self._name
        yield "values", self.values
        yield "subcommand", self._subcommand

    def __repr__(self):
        fields = ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
        return f"arg-matches({fields})"


__all__ = (
    "ArgMatches",
)
