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

r"""Display strings of single characters."""

from typing import FrozenSet
from typing import Sequence

PUNCTUATION: str = '!"#$%&\'()*+,-./:;<=>?@[\\]^_`{|}~'
r"""ASCII punctuation displayed as is."""

PRINTABLE: FrozenSet[int] = frozenset(
    b for b in range(0x80)
    if chr(b).isalnum() or chr(b) in PUNCTUATION
)
r"""Byte values displayed as their own glyph."""

_C0_NAMES: Sequence[str] = [
    'NUL', 'SOH', 'STX', 'ETX', 'EOT', 'ENQ', 'ACK', 'BEL',
    'BS', 'HT', 'LF', 'VT', 'FF', 'CR', 'SO', 'SI',
    'DLE', 'DC1', 'DC2', 'DC3', 'DC4', 'NAK', 'SYN', 'ETB',
    'CAN', 'EM', 'SUB', 'ESC', 'FS', 'GS', 'RS', 'US',
]

_C1_NAMES: Sequence[str] = [
    'PAD', 'HOP', 'BPH', 'NBH', 'IND', 'NEL', 'SSA', 'ESA',
    'HTS', 'HTJ', 'VTS', 'PLD', 'PLU', 'RI', 'SS2', 'SS3',
    'DCS', 'PU1', 'PU2', 'STS', 'CCH', 'MW', 'SPA', 'EPA',
    'SOS', 'SGCI', 'SCI', 'CSI', 'ST', 'OSC', 'PM', 'APC',
]


def _build_tokens() -> Sequence[str]:

    tokens = list(_C0_NAMES)
    tokens.append('SP')
    tokens.extend(chr(b) for b in range(0x21, 0x7F))
    tokens.append('DEL')
    tokens.extend(_C1_NAMES)
    tokens.append('NBSP')
    tokens.extend(chr(b) for b in range(0xA1, 0x100))
    tokens[0xAD] = 'SHY'
    return tokens


CHAR_TOKENS: Sequence[str] = _build_tokens()
r"""Display string of each byte value, as Latin-1 character."""


def is_printable(byte: int) -> bool:
    r"""Tells whether a byte is an ASCII alphanumeric or punctuation glyph."""

    return byte in PRINTABLE


def stringify_char(byte: int) -> str:
    r"""Short printable string of a byte value.

    Printable glyphs map to themselves, control characters to their
    mnemonics.

    Examples:
        >>> stringify_char(0x41)
        'A'
        >>> stringify_char(0x00)
        'NUL'
        >>> stringify_char(0x20)
        'SP'
    """

    return CHAR_TOKENS[byte]
