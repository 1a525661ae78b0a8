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

r"""Byte table layout."""

from typing import Iterable
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Sequence

from .ansi import Ansi
from .ansi import ljust
from .chars import CHAR_TOKENS
from .chars import is_printable

_DEC_TOKENS: Sequence[str] = ['%03d' % b for b in range(256)]
_HEX_TOKENS: Sequence[str] = ['0x%02X' % b for b in range(256)]
_OCT_TOKENS: Sequence[str] = ['0o%03o' % b for b in range(256)]
_BIN_TOKENS: Sequence[str] = ['0b' + bin(b)[2:].zfill(8) for b in range(256)]

REPR_ORDER: Sequence[str] = ['dec', 'hex', 'oct', 'bin', 'chr']
r"""Order of byte representations within a table entry."""

REPR_TOKENS: Mapping[str, Sequence[str]] = {
    'dec': _DEC_TOKENS,
    'hex': _HEX_TOKENS,
    'oct': _OCT_TOKENS,
    'bin': _BIN_TOKENS,
    'chr': CHAR_TOKENS,
}
r"""Text of each byte value, by representation."""

REPR_COLORS: Mapping[str, Ansi] = {
    'dec': Ansi.YELLOW,
    'hex': Ansi.MAGENTA,
    'oct': Ansi.BLUE,
    'bin': Ansi.CYAN,
}
r"""Numeric representation colors."""

CHAR_COLOR: Ansi = Ansi.GREEN
r"""Color of printable characters."""

NPC_COLOR: Ansi = Ansi.RED
r"""Color of non-printable characters."""

PLAIN_WIDTHS: Mapping[str, int] = {
    'dec': 5,
    'hex': 5,
    'oct': 4,
    'bin': 10,
    'chr': 4,
}
r"""Field widths without colors."""

COLOR_WIDTHS: Mapping[str, int] = {
    'dec': 5,
    'hex': 6,
    'oct': 7,
    'bin': 12,
    'chr': 3,
}
r"""Visible field widths with colors."""


# noinspection PyShadowingBuiltins
class TableOptions:
    r"""Byte table options.

    Args:
        dec (bool):
            Show the decimal representation.

        hex (bool):
            Show the hexadecimal representation.

        oct (bool):
            Show the octal representation.

        bin (bool):
            Show the binary representation.

        chr (bool):
            Show the character representation.

        horizontal (bool):
            Lay out entries by rows instead of by columns.

        color (bool):
            Colorize entries via ANSI escape sequences.

        columns (int):
            Number of table columns.

        column_width (int):
            Visible width of each table column.

        separator (str):
            Separator between columns.
    """

    def __init__(
        self,
        dec: bool = True,
        hex: bool = True,
        oct: bool = False,
        bin: bool = False,
        chr: bool = True,
        horizontal: bool = False,
        color: bool = True,
        columns: int = 5,
        column_width: int = 40,
        separator: str = ' | ',
    ):
        self.dec = dec
        self.hex = hex
        self.oct = oct
        self.bin = bin
        self.chr = chr
        self.horizontal = horizontal
        self.color = color
        self.columns = columns
        self.column_width = column_width
        self.separator = separator

    def __repr__(self) -> str:
        fields = ', '.join(f'{name}={value!r}' for name, value in vars(self).items())
        return f'{type(self).__name__}({fields})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TableOptions):
            return vars(self) == vars(other)
        return NotImplemented

    def disable_color(self) -> None:
        r"""Disables colors, also resetting the column width."""

        self.color = False
        self.column_width = 0

    @property
    def representations(self) -> List[str]:
        r"""list of str: Enabled representations, in display order."""

        return [name for name in REPR_ORDER if getattr(self, name)]


def _format_char_colored(byte: int) -> str:

    text = CHAR_TOKENS[byte]
    color = CHAR_COLOR if is_printable(byte) else NPC_COLOR
    return ljust(color.wrap(text), COLOR_WIDTHS['chr'])


def format_entry(byte: int, options: TableOptions) -> str:
    r"""Formats the table entry of a byte.

    Args:
        byte (int):
            Byte value.

        options (:class:`TableOptions`):
            Table options.

    Returns:
        str: Enabled representations, each padded to its field width.

    Examples:
        >>> format_entry(0x41, TableOptions(color=False))
        '065  0x41 A   '
    """

    tokens = []

    for name in options.representations:
        if options.color:
            if name == 'chr':
                token = _format_char_colored(byte)
            else:
                text = REPR_TOKENS[name][byte]
                token = ljust(REPR_COLORS[name].wrap(text), COLOR_WIDTHS[name])
        else:
            token = REPR_TOKENS[name][byte].ljust(PLAIN_WIDTHS[name])
        tokens.append(token)

    return ''.join(tokens)


def format_entries(data: Iterable[int], options: TableOptions) -> List[str]:
    r"""Formats the table entries of all the bytes, in order."""

    return [format_entry(byte, options) for byte in data]


def cell_index(
    row: int,
    column: int,
    row_count: int,
    columns: int,
    horizontal: bool,
) -> int:
    r"""Index of the entry displayed within a table cell.

    Args:
        row (int):
            Cell row.

        column (int):
            Cell column.

        row_count (int):
            Number of table rows.

        columns (int):
            Number of table columns.

        horizontal (bool):
            Row-major layout if true, column-major otherwise.

    Returns:
        int: Entry index; it may exceed the available entries.

    Examples:
        >>> cell_index(0, 1, 3, 2, False)
        3
        >>> cell_index(0, 1, 3, 2, True)
        1
    """

    if horizontal:
        return row * columns + column
    else:
        return row + column * row_count


def table_lines(data: Iterable[int], options: TableOptions) -> Iterator[str]:
    r"""Lays out the byte table.

    Args:
        data (bytes):
            Byte values to display.

        options (:class:`TableOptions`):
            Table options.

    Yields:
        str: Table lines, starting and ending with a blank line.

    Raises:
        ValueError: Invalid number of columns.
    """

    columns = options.columns.__index__()
    if columns < 1:
        raise ValueError('invalid columns')

    entries = format_entries(data, options)
    size = len(entries)
    row_count = (size + columns - 1) // columns
    width = options.column_width
    separator = options.separator
    horizontal = options.horizontal

    yield ''

    for row in range(row_count):
        cells = []
        append = cells.append

        for column in range(columns):
            index = cell_index(row, column, row_count, columns, horizontal)

            if index < size:
                if column:
                    append(separator)
                append(' ')
                append(ljust(entries[index], width))
            else:
                append(' ' * width)

        yield ''.join(cells)

    yield ''
