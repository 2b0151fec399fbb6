#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

#### alphabets ####

LOWER   = "abcdefghijklmnopqrstuvwxyz"
UPPER   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS  = "0123456789"
SYMBOLS = "~!@#$%^&*()_+`-={}|[]\\:\"<>?,./"

#### defaults ####

MAX_DIGITS  = len(DIGITS)   # 10
MAX_SYMBOLS = len(SYMBOLS)  # 30
LENGTH      = 40

#### kdf tags ####

BCRYPT = 'bcrypt'
SCRYPT = 'scrypt'
ARGON2 = 'argon2'
PBKDF2 = 'pbkdf2'

ALGORITHMS = (BCRYPT, SCRYPT, ARGON2, PBKDF2)
DEFAULT_ALGO = PBKDF2

#### kdf parameters ####
# pinned, changing any of these changes the output of `enc`

KEY_SIZE = 50

BCRYPT_COST = 10

SCRYPT_N = 65536
SCRYPT_R = 16
SCRYPT_P = 2
# 128 * N * r is ~128MiB, openssl refuses anything above 32MiB by default
SCRYPT_MAXMEM = 256 * 1024 * 1024

ARGON2_TIME = 2
ARGON2_MEMORY = 65536 # KiB
ARGON2_PARALLELISM = 8

PBKDF2_DIGEST = 'sha256'
PBKDF2_ITERATIONS = 10000
