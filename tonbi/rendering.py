"""
Help and version text for a command.

Rendering is deterministic and order-preserving; it only produces text.
Writing the text somewhere (standard output) belongs to Command.parse().

Layout of render_help(command), sections separated by one blank line:

    Usage: greeter [OPTIONS] [SUBCOMMAND]

    A simple greeting CLI application

    Options:
      -n, --name <name>    Name of the person to greet
      -e, --enthusiastic    Add excitement to the greeting

    Subcommands:
      farewell    Say goodbye instead of hello

Columns are separated by a fixed four-space gap; nothing is wrapped or aligned,
and the gap is dropped when an entry has no description.
"""

INDENT = "  "
SEPARATOR = "    "


def display(argument, /):
    """
    Return the help display form of an Arg.

    - positional: <name>
    - named: --name, "-s, --name" with a short alias, plus " <name>" when valued
    """
    if argument.positional:
        return f"<{argument.name}>"
    form = f"--{argument.name}"
    if argument.short is not None:
        form = f"-{argument.short}, {form}"
    if argument.takes_value:
        form += f" <{argument.name}>"
    return form


def _entry(label, descr, /):
    if not descr:
        return INDENT + label
    return INDENT + label + SEPARATOR + descr


def render_usage(command, /):
    return f"Usage: {command.name} [OPTIONS] [SUBCOMMAND]"


def render_help(command, /):
    """
    Render the full help text of `command` (no trailing newline).
    """
    sections = [render_usage(command)]

    if command.descr:
        sections.append(command.descr)

    if command.arguments:
        lines = ["Options:"]
        for argument in command.arguments:
            lines.append(_entry(display(argument), argument.descr))
        sections.append("\n".join(lines))

    if command.children:
        lines = ["Subcommands:"]
        for child in command.children:
            lines.append(_entry(child.name, child.descr))
        sections.append("\n".join(lines))

    return "\n\n".join(sections)


def render_version(command, /):
    """
    Render "<name> <version>", or None when the command declares no version.
    """
    if command.version is None:
        return None
    return f"{command.name} {command.version}"


__all__ = (
    "display",
    "render_usage",
    "render_help",
    "render_version",
)
