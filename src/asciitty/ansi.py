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

r"""ANSI escape sequence utilities."""

import enum
from typing import Mapping

ESC: str = '\x1b'
r"""Escape character, starting every escape sequence."""

ESC_END: str = 'm'
r"""Terminator of a color escape sequence."""


class Ansi(enum.Enum):
    r"""ANSI color codes."""

    RESET = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    INVALID = 7

    @property
    def code(self) -> str:
        r"""str: Raw escape sequence; empty for :attr:`INVALID`."""

        return ANSI_CODES[self]

    @classmethod
    def from_name(cls, name: str) -> 'Ansi':
        r"""Converts a color name into its code.

        Args:
            name (str):
                Case-insensitive color name.

        Returns:
            :class:`Ansi`: The matching code, :attr:`INVALID` if unknown.

        Examples:
            >>> Ansi.from_name('red')
            <Ansi.RED: 1>
            >>> Ansi.from_name('purple')
            <Ansi.INVALID: 7>
        """

        return ANSI_NAMES.get(name.upper(), cls.INVALID)

    def wrap(self, text: str) -> str:
        r"""Wraps text between this code and the reset code.

        Examples:
            >>> Ansi.RED.wrap('Hello')
            '\x1b[31mHello\x1b[0m'
        """

        return ANSI_CODES[self] + text + ANSI_CODES[Ansi.RESET]


ANSI_CODES: Mapping[Ansi, str] = {
    Ansi.RESET: '\x1b[0m',
    Ansi.RED: '\x1b[31m',
    Ansi.GREEN: '\x1b[32m',
    Ansi.YELLOW: '\x1b[33m',
    Ansi.BLUE: '\x1b[34m',
    Ansi.MAGENTA: '\x1b[35m',
    Ansi.CYAN: '\x1b[36m',
    Ansi.INVALID: '',
}
r"""Raw escape sequence of each code."""

ANSI_NAMES: Mapping[str, Ansi] = {
    'RESET': Ansi.RESET,
    'RED': Ansi.RED,
    'GREEN': Ansi.GREEN,
    'YELLOW': Ansi.YELLOW,
    'BLUE': Ansi.BLUE,
    'MAGENTA': Ansi.MAGENTA,
    'CYAN': Ansi.CYAN,
}
r"""Code of each upper-case color name."""


def code_of(code: Ansi) -> str:
    r"""Raw escape sequence of a code."""

    return code.code


def wrap(code: Ansi, text: str) -> str:
    r"""Wraps text between a code and the reset code."""

    return code.wrap(text)


def strip(text: str) -> str:
    r"""Strips escape sequences.

    Every substring from an escape character through the next ``m`` is
    removed. An unterminated sequence swallows the rest of the text.

    Args:
        text (str):
            Text to clean.

    Returns:
        str: Visible text.

    Examples:
        >>> strip('\x1b[31mHello, world!\x1b[0m')
        'Hello, world!'
        >>> strip('abc\x1b[31')
        'abc'
    """

    chars = []
    append = chars.append
    inside = False

    for c in text:
        if c == ESC:
            inside = True
        elif inside:
            if c == ESC_END:
                inside = False
        else:
            append(c)

    return ''.join(chars)


def true_length(text: str) -> int:
    r"""Visible length of text, ignoring escape sequences.

    Examples:
        >>> len(Ansi.RED.wrap('Hello, world!'))
        22
        >>> true_length(Ansi.RED.wrap('Hello, world!'))
        13
    """

    return len(strip(text))


def ljust(text: str, width: int) -> str:
    r"""Left-aligns text to a visible width.

    Padding is computed against :func:`true_length`, so embedded escape
    sequences do not count. Longer text is never truncated.
    """

    padding = width - true_length(text)
    if padding > 0:
        text += ' ' * padding
    return text
