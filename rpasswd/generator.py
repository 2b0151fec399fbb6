#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

"""random password generation with exact character-class counts

a password is assembled from three groups, exactly `digits` characters from
DIGITS, exactly `symbols` from SYMBOLS and the rest from the letter
alphabet (LOWER, or LOWER+UPPER). each group is drawn uniformly, then the
whole thing is shuffled so the class of a position leaks nothing.
"""

from collections import namedtuple
from rpasswd import rng
from rpasswd.consts import LOWER, UPPER, DIGITS, SYMBOLS
from rpasswd.errors import InvalidParam, Unsatisfiable

GenParams = namedtuple('GenParams',
                       ('length', 'digits', 'symbols', 'lowercase_only', 'allow_repeat'),
                       defaults=(0, 0, False, False))

def letters(lowercase_only):
    if lowercase_only: return LOWER
    return LOWER + UPPER

def validate(params):
    if params.length < 0:
        raise InvalidParam(f"length must not be negative, got {params.length}")
    if params.digits < 0:
        raise InvalidParam(f"digits must not be negative, got {params.digits}")
    if params.symbols < 0:
        raise InvalidParam(f"symbols must not be negative, got {params.symbols}")
    if params.digits + params.symbols > params.length:
        raise InvalidParam(f"number of digits ({params.digits}) and symbols ({params.symbols}) "
                           f"exceeds total length ({params.length})")

    if params.allow_repeat: return
    if params.digits > len(DIGITS):
        raise Unsatisfiable(f"number of digits ({params.digits}) exceeds the {len(DIGITS)} "
                            "available digits and repeats are not allowed")
    if params.symbols > len(SYMBOLS):
        raise Unsatisfiable(f"number of symbols ({params.symbols}) exceeds the {len(SYMBOLS)} "
                            "available symbols and repeats are not allowed")
    alphabet = letters(params.lowercase_only)
    nletters = params.length - params.digits - params.symbols
    if nletters > len(alphabet):
        raise Unsatisfiable(f"number of letters ({nletters}) exceeds the {len(alphabet)} "
                            "available letters and repeats are not allowed")

def sample(alphabet, count, seen, allow_repeat):
    res = []
    while len(res) < count:
        c = rng.choice(alphabet)
        if not allow_repeat and c in seen:
            continue
        seen.add(c)
        res.append(c)
    return res

def generate(params):
    validate(params)
    seen = set()
    chars = sample(DIGITS, params.digits, seen, params.allow_repeat)
    chars += sample(SYMBOLS, params.symbols, seen, params.allow_repeat)
    chars += sample(letters(params.lowercase_only),
                    params.length - params.digits - params.symbols,
                    seen, params.allow_repeat)
    return ''.join(rng.shuffle(chars))

def generate_password(length, digits=0, symbols=0, lowercase_only=False, allow_repeat=False):
    return generate(GenParams(length, digits, symbols, lowercase_only, allow_repeat))
