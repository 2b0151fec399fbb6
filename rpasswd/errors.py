#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

class RPasswdError(Exception):
    pass

class InvalidParam(RPasswdError, ValueError):
    """numeric arguments out of domain or inconsistent"""

class Unsatisfiable(RPasswdError, ValueError):
    """not enough distinct characters to honor allow_repeat=False"""

class UnknownAlgorithm(RPasswdError, ValueError):
    def __init__(self, algo):
        self.algo = algo
        super().__init__(f"`{algo}` is not a supported key derivation function hash")

class EntropyFailure(RPasswdError):
    pass

class HashError(RPasswdError):
    def __init__(self, algo, reason=None):
        self.algo = algo
        msg = f"{algo} failed"
        if reason is not None:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
