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

r"""Association of command line values with their keys.

Tokens are classified as *keys* (``--long`` or ``-s`` / ``-sx`` flags) or
*values* (anything else). Each value belongs to the closest key preceding
it, so a key can be followed by any number of values.
"""

from typing import List
from typing import Sequence
from typing import Tuple

LONG_PREFIX: str = '--'
SHORT_PREFIX: str = '-'

ArgumentPair = Tuple[str, Tuple[str, ...]]


def is_key(token: str) -> bool:
    r"""Tells whether a command line token is a key.

    Args:
        token (str):
            Command line token.

    Returns:
        bool: The token is a long or short flag name.

    Examples:
        >>> is_key('--bytes')
        True
        >>> is_key('-h')
        True
        >>> is_key('--a--b')
        False
        >>> is_key('0..10')
        False
    """

    if token.startswith(LONG_PREFIX):
        return LONG_PREFIX not in token[len(LONG_PREFIX):]

    return len(token) in (2, 3) and token.startswith(SHORT_PREFIX)


def associate_arguments(argv: Sequence[str]) -> List[ArgumentPair]:
    r"""Splits command line arguments into key-values pairs.

    The values of a key are all the value tokens found after it, up to the
    next key. Values before the first key are dropped.

    Args:
        argv (list of str):
            Command line arguments, the first being the program name, which
            is never classified.

    Returns:
        list of pairs: ``(key, values)`` in command line order; the same key
        may appear more than once.

    Examples:
        >>> associate_arguments(['prog', 'x', '--a', 'v1', 'v2', '-b', 'v3'])
        [('--a', ('v1', 'v2')), ('-b', ('v3',))]
    """

    key_indices = [index for index in range(1, len(argv)) if is_key(argv[index])]
    pairs = []

    for j, start in enumerate(key_indices):
        if j + 1 < len(key_indices):
            endex = key_indices[j + 1]
        else:
            endex = len(argv)

        values = tuple(argv[start + 1:endex])
        pairs.append((argv[start], values))

    return pairs
