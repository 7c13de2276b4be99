"""
Tonbi command layer: build, compose, and run CLI commands.

What this module provides
- Command: a fluent builder and tree node owning its arguments (Arg) and its
  child commands (subcommands). Built once, then read by the parser and the
  help renderer.
- invoke(command, prompt): parse the process arguments (or a given prompt) and
  dispatch to the handler bound on the deepest activated command.

Quick start
    from tonbi import Arg, Command, invoke

    app = (
        Command("greeter", "A simple greeting CLI application")
        .arg("name", "Name of the person to greet", short="n", takes_value=True)
        .arg("enthusiastic", "Add excitement to the greeting", short="e")
        .subcommand(
            Command("farewell", "Say goodbye instead of hello")
            .arg("name", "Name of the person to bid farewell", short="n", takes_value=True)
        )
    )

    matches = app.parse()  # sys.argv[1:]; prints help/version and exits on request

Design notes
- Ownership is tree-shaped: a command owns its args and children, children do
  not know their parent.
- Duplicate argument names, short aliases, or child names are accepted; lookups
  are first-match-wins in declaration order and a ShadowedNameWarning is
  emitted when the later declaration can never be reached.
- parse() (see tonbi.parsing) is the pure entry point; Command.parse() is the
  thin process-facing wrapper that applies the exit convention.

See also
- tonbi.arguments for Arg semantics.
- tonbi.faults for fault codes and rendering behavior.
"""
import sys

from rich.console import Console
from rich.text import Text

from .arguments import Arg
from .faults import *
from .outcomes import *
from .parsing import parse, tokenize
from .utils import *

console = Console()


class CommandType(type):
    """
    Metaclass of Command.

    Same contract as the Arg metaclass: __introspectable__ fields are exposed
    read-only (lists as tuples) and the repr lists the __displayable__ ones.
    """

    def __init__(cls, name, bases, namespace, **options):
        super().__init__(name, bases, namespace, **options)
        introspect(cls)


def _check_metadata(cls, metadata):
    """
    Validate scalar metadata in place.

    - name: non-empty str (a token the user types to select the command).
    - descr: str (may be empty).
    - version: None | str.

    Errors
    - TypeError: wrong types.
    - ValueError: empty or whitespace-containing name.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name or any(char.isspace() for char in name):
        raise ValueError(f"{cls.__typename__} 'name' must be a non-empty word")

    if not isinstance(metadata["descr"], str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")

    if not isinstance(metadata["version"], str | None):
        raise TypeError(f"{cls.__typename__} 'version' must be a string")

    metadata["shell"] = bool(metadata["shell"])


class Command(metaclass=CommandType):
    """
    One command (or subcommand) level of a CLI.

    Responsibilities
    - Composition: owns an ordered list of Arg and an ordered list of child
      Command; every mutator returns the command itself for chaining.
    - Lookup: first-match-wins helpers used by the parser.
    - Invocation: parse() applies the process exit convention; handler()
      binds the callable that invoke() dispatches to.

    Runtime flags
    - shell: when True, parse faults are printed to standard error and the
      process exits with code 1; otherwise the ParseError is raised. Children
      created through subcommand(name, ...) inherit it.
    """

    __introspectable__ = (
        "name",
        "descr",
        "version",
        "arguments",
        "children",
        "callback",
        "shell",
    )

    __displayable__ = (
        "name",
        "descr",
        "version",
        "arguments",
        "children",
        "shell",
    )

    def __init__(
            self,
            name,
            /,
            descr="",
            version=None,
            arguments=(),
            children=(),
            *,
            shell=False
    ):
        """
        Construct a Command.

        Parameters
        - name: str
          The word that selects this command (program name at the root).
        - descr: str
          Description shown under the usage line.
        - version: None | str
          Version reported by '--version' / '-V'.
        - arguments: Iterable[Arg]
          Initial arguments, appended in order through arg().
        - children: Iterable[Command]
          Initial subcommands, appended in order through subcommand().
        - shell: bool
          Print-and-exit fault handling (see class docstring).
        """
        metadata = {
            "name": name,
            "descr": descr,
            "version": version,
            "shell": shell,
        }
        _check_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._arguments = []
        self._children = []
        self._callback = None

        for argument in arguments:
            self.arg(argument)
        for child in children:
            self.subcommand(child)

    @property
    def positionals(self):
        """
        Positional arguments in declaration order.
        """
        return tuple(argument for argument in self._arguments if argument.positional)

    def describe(self, descr, /):
        """
        Set the description; returns self.
        """
        if not isinstance(descr, str):
            raise TypeError(f"{type(self).__typename__} 'descr' must be a string")
        self._descr = descr
        return self

    def release(self, version, /):
        """
        Attach the version string reported by '--version'; returns self.
        """
        if not isinstance(version, str | None):
            raise TypeError(f"{type(self).__typename__} 'version' must be a string")
        self._version = version
        return self

    def arg(self, source, /, *args, **kwargs):
        """
        Append an argument; returns self.

        Invocation modes
        - arg(Arg(...))                 append the given spec.
        - arg("name", "descr", **meta)  build the Arg in place (same parameters
                                        as Arg) and append it.
        """
        if isinstance(source, Arg):
            if args or kwargs:
                raise TypeError(f"{type(self).__typename__}.arg() takes no metadata with an Arg instance")
            argument = source
        else:
            argument = Arg(source, *args, **kwargs)

        if not argument.positional:
            if self.find_argument(argument.name) is not None:
                self._shadowed("argument", "--" + argument.name)
            if argument.short is not None and self.find_short(argument.short) is not None:
                self._shadowed("short option", "-" + argument.short)
        elif any(other.name == argument.name for other in self._arguments):
            self._shadowed("argument", argument.name)

        self._arguments.append(argument)
        return self

    def subcommand(self, source, /, *args, **kwargs):
        """
        Append a child command; returns self (the parent) for chaining.

        Invocation modes
        - subcommand(Command(...))               append the given command.
        - subcommand("name", "descr", **meta)    build the child in place; its
                                                 shell flag defaults to ours.
        """
        if isinstance(source, Command):
            if args or kwargs:
                raise TypeError(f"{type(self).__typename__}.subcommand() takes no metadata with a Command instance")
            if source is self:
                raise ValueError(f"{type(self).__typename__} cannot be its own subcommand")
            child = source
        else:
            kwargs.setdefault("shell", self.shell)
            child = Command(source, *args, **kwargs)

        if self.find_child(child.name) is not None:
            self._shadowed("subcommand", child.name)

        self._children.append(child)
        return self

    def handler(self, callback, /):
        """
        Bind the callable invoke() runs when this command is the deepest
        activated one. It receives this level's ArgMatches.

        Rules
        - Must be callable.
        - Can be set only once per command.

        Returns
        - The same callable, enabling decorator-style usage: @cmd.handler
        """
        if not callable(callback):
            raise TypeError(f"{type(self).__typename__} handler must be callable")
        if self._callback is not None:
            raise TypeError(f"{type(self).__typename__} handler cannot be overridden")
        self._callback = callback
        return callback

    def find_argument(self, name, /):
        """
        First named (non-positional) argument called `name`, or None.
        """
        for argument in self._arguments:
            if not argument.positional and argument.name == name:
                return argument
        return None

    def find_short(self, char, /):
        """
        First named argument whose short alias is `char`, or None.
        """
        for argument in self._arguments:
            if not argument.positional and argument.short == char:
                return argument
        return None

    def find_child(self, name, /):
        """
        First child command called `name`, or None.
        """
        for child in self._children:
            if child.name == name:
                return child
        return None

    def _shadowed(self, kind, input, /):
        trigger(ShadowedNameWarning(
            "%s %r of %r is already declared; the first declaration wins" % (kind, input, self.name),
            title="shadowed %s" % kind,
            code=FaultCode.SHADOWED_NAME,
            input=input,
            hint="rename or remove the later declaration",
            docs=getdoc(FaultCode.SHADOWED_NAME),
        ), prog=self.name, shell=self.shell)

    def parse(self, prompt=Unset, /):
        """
        Parse the process arguments (or `prompt`) and return the ArgMatches.

        Parameters
        - prompt: Unset | str | Iterable[str]
          Unset reads sys.argv[1:] (see tonbi.parsing.tokenize).

        Behavior
        - help/version requested: the text is printed to standard output and
          SystemExit(0) is raised (nothing is printed for an undeclared version).
        - parse fault: triggered with this command's shell flag; printed to
          standard error with SystemExit(1) in shell mode, raised otherwise.
        """
        match outcome := parse(self, tokenize(prompt)):
            case Matched(matches):
                return matches
            case HelpRequested(text=text) | VersionRequested(text=text):
                if text is not None:
                    console.print(Text(text), soft_wrap=True)
                sys.exit(outcome.exitcode)
            case Failed(fault):
                trigger(fault, prog=self.name, shell=self.shell)


def invoke(command, prompt=Unset, /):
    """
    Parse and dispatch to the deepest bound handler.

    Parameters
    - command: Command
    - prompt: Unset | str | Iterable[str] (see Command.parse)

    Behavior
    - Runs command.parse(prompt) (help, version and faults behave as there).
    - Walks the activated subcommand chain; the handler of the deepest
      command that has one is called with that command's ArgMatches.

    Returns
    - The handler's return value, or None when no handler is bound on the chain.
    """
    if not isinstance(command, Command):
        raise TypeError("invoke() first argument must be a command")

    matches = command.parse(prompt)
    target = (command.callback, matches)

    while (subcommand := matches.subcommand()) is not None:
        name, matches = subcommand
        command = command.find_child(name)
        if command.callback is not None:
            target = (command.callback, matches)

    callback, matches = target
    if callback is None:
        return None
    return callback(matches)


__all__ = (
    "Command",
    "invoke",
)

# Internal; not part of the public API.
del CommandType
