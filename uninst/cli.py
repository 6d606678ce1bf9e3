"""Command-line handling: options, help and version text, file naming."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from .extract import ExtractError, Mode

__all__ = [
    "UsageError",
    "Options",
    "program_name",
    "parse_args",
    "usage_text",
    "version_text",
    "product_description_name",
    "idb_path",
]

PROG_NAME = "uninst"
PROG_VERSION_STRING = "0.2"
PROG_EMAIL = "[email]"


class UsageError(Exception):
    """The command line is not valid; the user should consult the help."""


@dataclass(frozen=True)
class Options:
    """The result of parsing the command line."""

    filename: str | None = None
    list_files: bool = False
    test: bool = False
    verbose: bool = False
    show_help: bool = False
    show_version: bool = False

    @property
    def mode(self) -> Mode:
        if self.list_files:
            return Mode.LIST
        if self.test:
            return Mode.TEST
        return Mode.EXTRACT


def program_name(argv0: str) -> str:
    """Return the program's name as shown in messages: no directory, no suffix."""
    base = argv0.rpartition(os.sep)[2]
    if os.altsep:
        base = base.rpartition(os.altsep)[2]
    stem, dot, _ = base.rpartition(".")
    return stem if dot else base


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name.

    Options may appear before or after the file name; ``--`` ends them.
    ``-h`` and ``-V`` take effect as soon as they are seen.
    """
    seen: set[str] = set()
    operands: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            operands.extend(args)
            break
        if arg == "-" or not arg.startswith("-"):
            operands.append(arg)
            continue
        for letter in arg[1:]:
            if letter == "h":
                return Options(show_help=True)
            if letter == "V":
                return Options(show_version=True)
            if letter not in "ltv":
                raise UsageError(f"unrecognized option '-{letter}'")
            if letter in seen:
                raise UsageError(f"option '-{letter}' can only be used once")
            seen.add(letter)

    if "l" in seen and "t" in seen:
        raise UsageError("cannot use -l and -t together")
    if "l" in seen and "v" in seen:
        raise UsageError("cannot use -l and -v together")
    if not operands:
        raise UsageError("must specify a file")
    return Options(
        filename=operands[0],
        list_files="l" in seen,
        test="t" in seen,
        verbose="v" in seen,
    )


def usage_text(prog: str) -> str:
    """Return the help text printed for ``-h``."""
    return (
        f"Usage: {prog} [OPTION] <FILE>\n"
        "Extract files from the IRIX 'inst' package in FILE.\n"
        "\n"
        "  -h       print this help text\n"
        "  -l       list files instead of extracting\n"
        "  -t       test checksum of files in package\n"
        "  -v       list files while extracting\n"
        "  -V       print program version\n"
        "\n"
        f"Please report any bugs to <{PROG_EMAIL}>.\n"
    )


def version_text() -> str:
    """Return the version line printed for ``-V``."""
    return f"{PROG_NAME}_{PROG_VERSION_STRING}"


def product_description_name(filename: str) -> str:
    """Return the product description path for the file the user named.

    A name containing a dot is rejected, since product description files
    carry no suffix.
    """
    if "." in filename:
        raise ExtractError(
            "given file has too many dots in its name; "
            "are you sure this is the product description file?"
        )
    return filename


def idb_path(product: str) -> str:
    """Return the path of the idb file belonging to ``product``."""
    return f"{product}.idb"