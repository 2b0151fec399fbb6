#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

"""uniform random integers on top of libsodium's CSPRNG

everything in rpasswd that needs randomness goes through rand_int(), which
avoids modulo bias by rejection sampling 32 bit words.
"""

import pysodium
from rpasswd.errors import EntropyFailure

WORD_SIZE = 4
WORD_SPACE = 1 << (WORD_SIZE * 8)

def randombytes(size):
    try:
        return pysodium.randombytes(size)
    except (OSError, ValueError) as exc:
        raise EntropyFailure(f"could not read {size} random bytes: {exc}") from exc

def rand_int(n):
    if n <= 0 or n > WORD_SPACE:
        raise ValueError(f"rand_int: n must be in [1, {WORD_SPACE}], got {n}")
    # largest multiple of n that fits in a word, everything at or above is rejected
    limit = WORD_SPACE - (WORD_SPACE % n)
    while True:
        v = int.from_bytes(randombytes(WORD_SIZE), 'big')
        if v < limit:
            return v % n

def choice(seq):
    return seq[rand_int(len(seq))]

def shuffle(seq):
    # fisher-yates, in place
    for i in range(len(seq) - 1, 0, -1):
        j = rand_int(i + 1)
        seq[i], seq[j] = seq[j], seq[i]
    return seq
