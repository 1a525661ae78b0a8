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

r"""Byte specification parsing.

A byte specification is a comma-separated list of parts, each being one
of:

* a byte literal: ``N`` (decimal), ``0xN`` (hexadecimal), ``0oN`` (octal),
  ``0bN`` (binary);
* an inclusive range of two literals: ``A..B``;
* a named range, case-insensitive: ``ascii``, ``extended``, ``asciix``.
"""

import re
from typing import List
from typing import Mapping
from typing import Sequence

RANGE_SEP: str = '..'
r"""Separator of range bounds."""

PART_SEP: str = ','
r"""Separator of specification parts."""

NAMED_RANGES: Mapping[str, range] = {
    'ascii': range(0x00, 0x80),
    'extended': range(0x80, 0x100),
    'asciix': range(0x00, 0x100),
}
r"""Byte values of each range name."""

_BYTE_REGEX = re.compile(r'^(?P<prefix>(0x|0o|0b)?)(?P<value>[0-9A-Fa-f]+)\Z')

_PREFIX_BASE: Mapping[str, int] = {
    '': 10,
    '0x': 16,
    '0o': 8,
    '0b': 2,
}


class ByteSpecError(ValueError):
    r"""Invalid byte specification."""


def parse_byte(token: str) -> int:
    r"""Parses a byte literal.

    Args:
        token (str):
            Literal text, optionally prefixed with ``0x``, ``0o``, or ``0b``.

    Returns:
        int: Byte value.

    Raises:
        :class:`ByteSpecError`: Malformed or out-of-range literal.

    Examples:
        >>> parse_byte('0x7F')
        127
        >>> parse_byte('0b1100')
        12
    """

    m = _BYTE_REGEX.match(token)
    if not m:
        raise ByteSpecError(f'invalid byte: {token!r}')

    base = _PREFIX_BASE[m.group('prefix')]
    try:
        value = int(m.group('value'), base)
    except ValueError:
        raise ByteSpecError(f'invalid byte: {token!r}') from None

    if not 0 <= value <= 0xFF:
        raise ByteSpecError(f'byte out of range: {token!r}')
    return value


def parse_byte_range(token: str) -> Sequence[int]:
    r"""Parses a byte literal or an inclusive byte range.

    A range whose start exceeds its end is empty.

    Examples:
        >>> list(parse_byte_range('0x41..0x43'))
        [65, 66, 67]
        >>> list(parse_byte_range('7'))
        [7]
        >>> list(parse_byte_range('10..1'))
        []
    """

    if RANGE_SEP in token:
        start, endin = token.split(RANGE_SEP, 1)
        return range(parse_byte(start), parse_byte(endin) + 1)
    else:
        return [parse_byte(token)]


def parse_byte_spec(text: str) -> List[int]:
    r"""Parses a full byte specification.

    Parts are concatenated in order, without removing duplicates.

    Examples:
        >>> parse_byte_spec('1,0x02,0b1100,1..4')
        [1, 2, 12, 1, 2, 3, 4]
        >>> len(parse_byte_spec('ascii,extended'))
        256
    """

    values = []
    for part in text.split(PART_SEP):
        named = NAMED_RANGES.get(part.lower())
        if named is not None:
            values.extend(named)
        else:
            values.extend(parse_byte_range(part))
    return values
