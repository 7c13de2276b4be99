"""
Tonbi parser: walk a token sequence against a command tree.

parse(command, tokens) is a pure function. It never prints and never ends the
process; it returns one tagged outcome (see tonbi.outcomes):

- Matched(matches)                 every token was consumed,
- HelpRequested(command, text)     '--help' / '-h' was reached,
- VersionRequested(command, text)  '--version' / '-V' was reached,
- Failed(fault)                    the first ParseError at any nesting level.

Token classification (left to right, per level)
1. '--help' / '-h'        render help for the current command, stop.
2. '--version' / '-V'     render the version (None when undeclared), stop.
3. '--'                   every later token at this level is a positional value.
4. '--name'               named argument lookup among the current command's own
                          args; valued ones consume the next token verbatim.
5. '-abc'                 each character is a short alias, in order; valued
                          ones consume the next whole token.
6. child name             all remaining tokens belong to that subcommand.
7. anything else          next positional slot (dedicated positional cursor).

After a level is done (and after its subcommand returned), the first declared
required argument that was not matched is reported.

tokenize(prompt) turns the process arguments, a shell-like string, or an
iterable of strings into the token list parse() expects.
"""
import difflib
import shlex
import sys
from collections.abc import Iterable

from .faults import *
from .matches import ArgMatches
from .outcomes import *
from .rendering import display, render_help, render_version
from .utils import *

HELP_TOKENS = ("--help", "-h")
VERSION_TOKENS = ("--version", "-V")
TERMINATOR = "--"


def tokenize(prompt=Unset, /):
    """
    Normalize a prompt into a list of tokens.

    Parameters
    - prompt:
      • Unset: read tokens from sys.argv[1:].
      • str: shell-like string; split via shlex.split.
      • Iterable[str]: pre-tokenized sequence, kept verbatim (no trimming).

    Raises
    - TypeError: when prompt is not Unset/str/Iterable[str], or when an
      iterable contains a non-string element.
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("tokenize() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("tokenize() argument must be a string or an iterable of strings")


def _hint(route, suggestions, noun, /):
    """
    shared hint copy: suggest the closest name first, then point at --help.
    """
    route = " ".join(route)
    try:
        return "did you mean %r? you can also run '%s --help' to see all %s" % (suggestions[0], route, noun)
    except IndexError:
        return "try '%s --help' to see all available %s" % (route, noun)


def _parse_long(command, tokens, index, values, route, /):
    """
    handle one '--name' token; return the index of the next unread token.
    """
    token = tokens[index]
    name = token[2:]

    if (argument := command.find_argument(name)) is None:
        suggestions = difflib.get_close_matches(
            token, ["--" + other.name for other in command.arguments if not other.positional], 5
        )
        raise UnknownOptionError(
            "unknown option %r at %s position" % (token, ordinal(index + 1)),
            title="unknown option",
            code=FaultCode.UNKNOWN_OPTION,
            input=name,
            index=index + 1,
            suggestions=suggestions,
            hint=_hint(route, suggestions, "options"),
            route=" ".join(route),
            prog=route[0],
            docs=getdoc(FaultCode.UNKNOWN_OPTION),
        )

    if not argument.takes_value:
        values[argument.name] = None
        return index + 1

    if index + 1 >= len(tokens):
        raise _missing_value(argument, token, index, route)
    values[argument.name] = tokens[index + 1]
    return index + 2


def _parse_shorts(command, tokens, index, values, route, /):
    """
    handle one '-abc' cluster; return the index of the next unread token.

    valued shorts take whole tokens after the cluster, in cluster order.
    """
    token = tokens[index]
    following = index + 1

    for char in token[1:]:
        if (argument := command.find_short(char)) is None:
            suggestions = difflib.get_close_matches(
                char, [other.short for other in command.arguments if other.short and not other.positional], 5
            )
            raise UnknownShortOptionError(
                "unknown short option '-%s' in %r at %s position" % (char, token, ordinal(index + 1)),
                title="unknown short option",
                code=FaultCode.UNKNOWN_SHORT_OPTION,
                input=char,
                index=index + 1,
                suggestions=suggestions,
                hint=_hint(route, ["-" + short for short in suggestions], "options"),
                route=" ".join(route),
                prog=route[0],
                docs=getdoc(FaultCode.UNKNOWN_SHORT_OPTION),
            )

        if not argument.takes_value:
            values[argument.name] = None
            continue

        if following >= len(tokens):
            raise _missing_value(argument, "-" + char, index, route)
        values[argument.name] = tokens[following]
        following += 1

    return following


def _missing_value(argument, input, index, route, /):
    return MissingOptionValueError(
        "option %r at %s position requires a value" % (input, ordinal(index + 1)),
        title="missing option value",
        code=FaultCode.MISSING_OPTION_VALUE,
        input=argument.name,
        index=index + 1,
        hint="pass the value after a space (for example: %s <%s>)" % (input, argument.name),
        route=" ".join(route),
        prog=route[0],
        docs=getdoc(FaultCode.MISSING_OPTION_VALUE),
    )


def _unknown_argument(command, token, index, route, /):
    if command.children:
        suggestions = difflib.get_close_matches(token, [child.name for child in command.children], 5)
        hint = _hint(route, suggestions, "subcommands")
    else:
        suggestions = []
        hint = "remove this extra value or run '%s --help' to see the expected usage" % " ".join(route)
    return UnknownArgumentError(
        "unexpected argument %r at %s position" % (token, ordinal(index + 1)),
        title="unexpected argument",
        code=FaultCode.UNKNOWN_ARGUMENT,
        input=token,
        index=index + 1,
        suggestions=suggestions,
        hint=hint,
        route=" ".join(route),
        prog=route[0],
        docs=getdoc(FaultCode.UNKNOWN_ARGUMENT),
    )


def _check_required(command, values, route, /):
    for argument in command.arguments:
        if argument.required and argument.name not in values:
            raise MissingRequiredArgumentError(
                "required argument %r was not provided" % display(argument),
                title="missing required argument",
                code=FaultCode.MISSING_REQUIRED_ARGUMENT,
                input=argument.name,
                hint="add the missing argument or run '%s --help' to see the expected usage" % " ".join(route),
                route=" ".join(route),
                prog=route[0],
                docs=getdoc(FaultCode.MISSING_REQUIRED_ARGUMENT),
            )


def _parse_level(command, tokens, start, route, /):
    """
    parse tokens[start:] against one command level.

    raises ParseError on the first fault; returns Matched, or the terminal
    HelpRequested / VersionRequested outcome unchanged from any depth.
    """
    values = {}
    subcommand = None
    positionals = iter(command.positionals)
    terminated = False
    index = start

    while index < len(tokens):
        token = tokens[index]

        if not terminated:
            if token in HELP_TOKENS:
                return HelpRequested(command, render_help(command))
            if token in VERSION_TOKENS:
                return VersionRequested(command, render_version(command))
            if token == TERMINATOR:
                terminated = True
                index += 1
                continue
            if token.startswith("--"):
                index = _parse_long(command, tokens, index, values, route)
                continue
            if token.startswith("-") and len(token) > 1:
                index = _parse_shorts(command, tokens, index, values, route)
                continue
            if (child := command.find_child(token)) is not None:
                outcome = _parse_level(child, tokens, index + 1, (*route, child.name))
                if not isinstance(outcome, Matched):
                    return outcome
                subcommand = (child.name, outcome.matches)
                break

        try:
            argument = next(positionals)
        except StopIteration:
            raise _unknown_argument(command, token, index, route) from None
        values[argument.name] = token
        index += 1

    _check_required(command, values, route)
    return Matched(ArgMatches(command.name, values, subcommand))


def parse(command, tokens, /):
    """
    Parse `tokens` against `command` and return the tagged outcome.

    Parameters
    - command: Command
      root of the command tree (treated as read-only).
    - tokens: Iterable[str]
      the arguments without the program name (e.g., sys.argv[1:]).

    Returns
    - Matched | HelpRequested | VersionRequested | Failed

    Raises
    - TypeError: when tokens is Unset, a plain string, or contains
      non-strings (use tokenize() for sys.argv and shell-like strings).
    """
    if tokens is Unset:
        raise TypeError("parse() tokens must be given explicitly; use tokenize() to read sys.argv")
    if isinstance(tokens, str):
        raise TypeError("parse() tokens must be an iterable of strings, not a string")
    tokens = tokenize(tokens)

    try:
        return _parse_level(command, tokens, 0, (command.name,))
    except ParseError as fault:
        return Failed(fault)


__all__ = (
    "HELP_TOKENS",
    "VERSION_TOKENS",
    "TERMINATOR",
    "tokenize",
    "parse",
)
