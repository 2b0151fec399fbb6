#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

"""one-shot password hashing with a fixed parameter set per algorithm

  bcrypt  cost 10, native $2b$ encoding, the salt argument is ignored
  scrypt  N=65536 r=16 p=2, 50 bytes, hex (needs ~128MiB of ram)
  argon2  argon2id t=2 m=64MiB p=8, 50 bytes, hex
  pbkdf2  hmac-sha256 10000 iterations, 50 bytes, hex

the parameters are pinned so that hashes stay reproducible, if they ever
change the tag must change with them.
"""

import binascii, hashlib
import bcrypt
from argon2.low_level import hash_secret_raw, Type
from argon2.exceptions import HashingError
from rpasswd.consts import *
from rpasswd.errors import HashError, UnknownAlgorithm

def tobytes(v):
    if v is None: return b''
    if isinstance(v, str): return v.encode('utf8')
    return bytes(v)

def encode(raw):
    return binascii.hexlify(raw).decode('ascii')

def bcrypt_hash(password):
    try:
        return bcrypt.hashpw(password, bcrypt.gensalt(rounds=BCRYPT_COST)).decode('ascii')
    except ValueError as exc:
        # e.g. passwords longer than 72 bytes
        raise HashError(BCRYPT, exc) from exc

def scrypt_key(password, salt):
    try:
        return hashlib.scrypt(password, salt=salt, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P,
                              maxmem=SCRYPT_MAXMEM, dklen=KEY_SIZE)
    except (ValueError, MemoryError) as exc:
        raise HashError(SCRYPT, exc) from exc

def argon2_key(password, salt):
    try:
        return hash_secret_raw(secret=password, salt=salt,
                               time_cost=ARGON2_TIME,
                               memory_cost=ARGON2_MEMORY,
                               parallelism=ARGON2_PARALLELISM,
                               hash_len=KEY_SIZE,
                               type=Type.ID)
    except HashingError as exc:
        # libargon2 rejects salts shorter than 8 bytes
        raise HashError(ARGON2, exc) from exc

def pbkdf2_key(password, salt):
    try:
        return hashlib.pbkdf2_hmac(PBKDF2_DIGEST, password, salt, PBKDF2_ITERATIONS, KEY_SIZE)
    except (ValueError, OverflowError) as exc:
        raise HashError(PBKDF2, exc) from exc

def derive(password, salt, algo):
    if algo == BCRYPT:
        return bcrypt_hash(password)
    if algo == SCRYPT:
        return encode(scrypt_key(password, salt))
    if algo == ARGON2:
        return encode(argon2_key(password, salt))
    # anything else, pbkdf2 included
    return encode(pbkdf2_key(password, salt))

def hash_password(password, salt, algo=DEFAULT_ALGO):
    if algo not in ALGORITHMS:
        raise UnknownAlgorithm(algo)
    return derive(tobytes(password), tobytes(salt), algo)
