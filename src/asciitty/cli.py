# Copyright (c) 2013-2025, Andrea Zoppi
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -m asciitty` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``asciitty.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``asciitty.__main__`` in ``sys.modules``.

  Also see (1) from https://click.palletsprojects.com/en/stable/setuptools/#setuptools-integration
"""

import os
import re
from typing import Mapping
from typing import Sequence
from typing import Tuple

import click

from . import __version__
from .args import associate_arguments
from .bytespec import NAMED_RANGES
from .bytespec import ByteSpecError
from .bytespec import parse_byte_spec
from .table import TableOptions
from .table import table_lines

HELP_TEXT: str = r"""
Usage: asciitty [FLAGS] [OPTIONS]

Flags <default>:
    --help, -h   <false>        Show this help message.
    --version, -V <false>       Show the version and exit.
    --hex        <true>         Show hexadecimal representation
    --dec        <true>         Show decimal representation
    --oct        <false>        Show octal representation
    --bin        <false>        Show binary representation
    --chr        <true>         Show raw ASCII character representation
    --horizontal <false>        Lay out bytes horizontally.
    --color      <true>         Colorize output via ANSI.
    --stdin      <false>        Read bytes from stdin.

    Flags can be negated by prefixing with 'no-', e.g. --no-hex
    to disable flags set by default. --no-color also sets the column
    width to 0.

Options <default>:
    --columns   <5>      Number of columns to display.
    --width     <40>     Width of each column.
    --separator <" | ">  Separator between columns.

    --bytes  <ascii>   Which bytes to display.
             ---------------------------------
             ascii | extended | asciix | 1,2,3,4 ..etc
             ---------------------------------
             When providing specific values, the following formats are
             accepted: 0xN (hex), 0oN (octal), 0bN (binary), N (decimal).
             Or a range of values: 0..127, 0x00..0x7F, etc, or any combination
             of the above, e.g. 1,0x02,0b1100,1..10 etc. Duplicates are not
             ignored, thus:

             1,0x02,0b1100,1..10 =>
                1, 2, 12, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10

             Ranges are inclusive; a range starting after its end is empty.

             ascii, extended, and asciix can be included in the separated list
             e.g. ascii,extended would be the same as asciix, likewise,
             so would 0..127,extended.
             --------------------------------

    --string <None>    Display bytes from a string.
    --file <None>      Read bytes from a file.

    When using --stdin, --string, or --file, the default value of --bytes
    is ignored unless explicitly provided. If multiple sources are provided,
    the bytes are appended in the order the arguments are provided.
"""

HELP_KEYS: Sequence[str] = ('--help', '-h')
VERSION_KEYS: Sequence[str] = ('--version', '-V')

FLAG_KEYS: Mapping[str, Tuple[str, bool]] = {
    '--hex': ('hex', True),
    '--no-hex': ('hex', False),
    '--dec': ('dec', True),
    '--no-dec': ('dec', False),
    '--oct': ('oct', True),
    '--no-oct': ('oct', False),
    '--bin': ('bin', True),
    '--no-bin': ('bin', False),
    '--chr': ('chr', True),
    '--no-chr': ('chr', False),
    '--horizontal': ('horizontal', True),
    '--no-horizontal': ('horizontal', False),
    '--color': ('color', True),
}
r"""Table option set by each boolean flag."""

DEFAULT_BYTES: str = 'ascii'
r"""Byte specification used when no byte source is given."""

_UINT_REGEX = re.compile(r'^\+?[0-9]+\Z')

RAW_ARGS_KEY: str = 'asciitty.raw_args'
r"""Context metadata key of the unparsed command line arguments."""


class AsciittyError(click.ClickException):
    r"""Fatal command line error."""


class RawArgsCommand(click.Command):

    def parse_args(self, ctx, args):

        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


def parse_uint(key: str, value: str, minimum: int = 0) -> int:
    r"""Parses the unsigned integer value of an option.

    Raises:
        :class:`AsciittyError`: Invalid value.
    """

    if not _UINT_REGEX.match(value) or int(value) < minimum:
        raise AsciittyError(f'Invalid value for {key}: {value}')
    return int(value)


def read_file(path: str) -> bytes:
    r"""Reads all the bytes of a file.

    Raises:
        :class:`AsciittyError`: Missing or unreadable file.
    """

    if not os.path.isfile(path):
        raise AsciittyError(f'No file found at path: {path}')
    try:
        with open(path, 'rb') as stream:
            return stream.read()
    except OSError as e:
        raise AsciittyError(f"Error reading file '{path}' due to error '{e}'") from e


def read_stdin() -> bytes:
    r"""Reads all the bytes of the standard input."""

    return click.get_binary_stream('stdin').read()


def read_byte_spec(text: str) -> Sequence[int]:
    r"""Parses a byte specification.

    Raises:
        :class:`AsciittyError`: Invalid specification.
    """

    try:
        return parse_byte_spec(text)
    except ByteSpecError as e:
        raise AsciittyError(f'Invalid byte specification: {text} ({e})') from e


def print_help(ctx: click.Context) -> None:

    click.echo(HELP_TEXT)
    ctx.exit()


def print_version(ctx: click.Context) -> None:

    click.echo(str(__version__))
    ctx.exit()


# ----------------------------------------------------------------------------

@click.command(cls=RawArgsCommand,
               context_settings=dict(ignore_unknown_options=True,
                                     help_option_names=[]))
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, args: Sequence[str]) -> None:
    r"""Display bytes as a table of decimal, hexadecimal, octal, binary,
    and character representations.

    Arguments are processed in command line order; run with --help for the
    full list of flags and options.
    """

    del args  # rebuilt from the unparsed arguments, "--" included
    argv = [ctx.info_name or 'asciitty']
    argv.extend(ctx.meta[RAW_ARGS_KEY])

    options = TableOptions()
    data = bytearray()

    for key, values in associate_arguments(argv):
        if key in HELP_KEYS:
            print_help(ctx)

        elif key in VERSION_KEYS:
            print_version(ctx)

        elif key in FLAG_KEYS:
            name, value = FLAG_KEYS[key]
            setattr(options, name, value)

        elif key == '--no-color':
            options.disable_color()

        elif key == '--stdin':
            data.extend(read_stdin())

        elif not values:
            pass  # options without value are ignored

        elif key == '--columns':
            options.columns = parse_uint(key, values[0], minimum=1)

        elif key == '--width':
            options.column_width = parse_uint(key, values[0])

        elif key == '--separator':
            options.separator = values[0]

        elif key == '--bytes':
            data.extend(read_byte_spec(values[0]))

        elif key == '--string':
            data.extend(values[0].encode('utf-8', 'surrogateescape'))

        elif key == '--file':
            data.extend(read_file(values[0]))

    if not data:
        data.extend(NAMED_RANGES[DEFAULT_BYTES])

    for line in table_lines(data, options):
        click.echo(line, color=True)
