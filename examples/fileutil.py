"""
fileutil: display, copy and rename files.

    $ python examples/fileutil.py cat -f notes.txt
    $ python examples/fileutil.py copy notes.txt backup.txt
    $ python examples/fileutil.py rename backup.txt old-notes.txt
"""
import shutil
import sys
from pathlib import Path

from rich.console import Console

from tonbi import *

stderr = Console(stderr=True)

fileutil = (
    Command("fileutil", shell=True)
    .release("1.0")
    .describe("A simple file utility")
    .subcommand(
        Command("cat", "Display file contents")
        .arg("file", "File to display", required=True, short="f", takes_value=True)
    )
    .subcommand(
        Command("copy", "Copy a file")
        .arg("source", "Source file", required=True, positional=True)
        .arg("destination", "Destination file", required=True, positional=True)
    )
    .subcommand(
        Command("rename", "Rename a file")
        .arg("old", "Old file name", required=True, positional=True)
        .arg("new", "New file name", required=True, positional=True)
    )
)


def fail(message, /):
    stderr.print(message, markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


@fileutil.handler
def missing(matches):
    fail("No subcommand was used")


@fileutil.find_child("cat").handler
def cat(matches):
    file = matches.value_of("file")
    print(f"Displaying contents of file: {file}")
    try:
        print(Path(file).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as error:
        fail(f"Error reading file: {error}")


@fileutil.find_child("copy").handler
def copy(matches):
    try:
        shutil.copy(matches.value_of("source"), matches.value_of("destination"))
    except OSError as error:
        fail(f"Error copying file: {error}")
    print("File copied successfully")


@fileutil.find_child("rename").handler
def rename(matches):
    try:
        Path(matches.value_of("old")).rename(matches.value_of("new"))
    except OSError as error:
        fail(f"Error renaming file: {error}")
    print("File renamed successfully")


if __name__ == '__main__':
    invoke(fileutil)
