#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

import sys, getpass, argparse
from importlib.metadata import version, PackageNotFoundError
from SecureString import clearmem

from rpasswd import generator, kdf
from rpasswd.config import getcfg
from rpasswd.consts import *
from rpasswd.errors import RPasswdError, UnknownAlgorithm

#### config ####

cfg = getcfg('rpasswd').get('rpasswd', {})

verbose = cfg.get('verbose', False)
length = int(cfg.get('length', LENGTH))
uppercase = cfg.get('uppercase', True)
repeat = cfg.get('repeat', False)
quiet = cfg.get('quiet', False)
algo = cfg.get('algo', DEFAULT_ALGO)

if verbose:
    print("length:", length, file=sys.stderr)
    print("uppercase:", uppercase, file=sys.stderr)
    print("repeat:", repeat, file=sys.stderr)
    print("quiet:", quiet, file=sys.stderr)
    print("algo:", algo, file=sys.stderr)

#### Helper fns ####

def get_version():
  try:
    return version('rpasswd')
  except PackageNotFoundError:
    return 'devel'

def getpwd(prompt):
  if sys.stdin.isatty():
    return getpass.getpass(prompt).encode('utf8')
  else:
    return sys.stdin.buffer.readline().rstrip(b'\n')

def wipe(secret):
  # single byte objects are shared by the interpreter, leave them alone
  if len(secret) > 1:
    clearmem(secret)

def output(label, result, quiet):
  if quiet:
    print(result, end='')
  else:
    print(label)
    print(result)
  sys.stdout.flush()

#### argument parsing ####

def add_common_flags(parser, counts):
  parser.add_argument('length_arg', metavar='length', nargs='?', type=int,
                      help='password length, overrides --length')
  parser.add_argument('-l', '--length', type=int, default=length,
                      help='password length (default: %(default)s)')
  if counts:
    parser.add_argument('-d', '--digits', type=int, default=0,
                        help=f'quantity of digits (max. {MAX_DIGITS})')
    parser.add_argument('-s', '--symbols', type=int, default=0,
                        help=f'quantity of symbols (max. {MAX_SYMBOLS})')
  else:
    parser.add_argument('-d', '--digits', action=argparse.BooleanOptionalAction, default=True,
                        help=f'enable {MAX_DIGITS} digit characters')
    parser.add_argument('-s', '--symbols', action=argparse.BooleanOptionalAction, default=True,
                        help=f'enable {MAX_SYMBOLS} symbol characters')
  parser.add_argument('-u', '--uppercase', action=argparse.BooleanOptionalAction, default=uppercase,
                      help='allow upper and lower cases, --no-uppercase for lowercase only')
  parser.add_argument('-r', '--repeat', action=argparse.BooleanOptionalAction, default=repeat,
                      help='allow characters to repeat')
  parser.add_argument('-q', '--quiet', action=argparse.BooleanOptionalAction, default=quiet,
                      help='disallow verbose mode')

def get_parser(prog, cmd):
  if cmd is None:
    parser = argparse.ArgumentParser(prog=prog, description='A secure random password generator tool')
    add_common_flags(parser, counts=True)
  elif cmd == 'gen':
    parser = argparse.ArgumentParser(prog=f'{prog} gen',
                                     description='Generate a random password including lower-upper cases, '
                                                 'digits and symbols characters by default.')
    add_common_flags(parser, counts=False)
  elif cmd == 'cgen':
    parser = argparse.ArgumentParser(prog=f'{prog} cgen',
                                     description='Generate a random password with exact quantities of digits and symbols.')
    add_common_flags(parser, counts=True)
  else:
    parser = argparse.ArgumentParser(prog=f'{prog} enc',
                                     description='Encrypt a given password using a key derivation function hash.')
    parser.add_argument('algo_arg', metavar='algo', nargs='?',
                        help='hash function, overrides --algo')
    parser.add_argument('-a', '--algo', default=algo,
                        help=f'key derivation function hash like {", ".join(ALGORITHMS)} (default: %(default)s)')
    parser.add_argument('-q', '--quiet', action=argparse.BooleanOptionalAction, default=quiet,
                        help='print only the hash')
  return parser

#### commands ####

def genparams(args):
  size = args.length if args.length_arg is None else args.length_arg
  digits, symbols = args.digits, args.symbols
  if isinstance(digits, bool):
    digits = MAX_DIGITS if digits else 0
    symbols = MAX_SYMBOLS if symbols else 0
  return generator.GenParams(size, digits, symbols, not args.uppercase, args.repeat)

def gen(args):
  params = genparams(args)
  if verbose:
    print(f"params: {params}", file=sys.stderr)
  if not args.quiet:
    print(f"Generating password {params.length} characters long...")
  pwd = generator.generate(params)
  output("Password generated:", pwd, args.quiet)
  return pwd

def enc(args):
  hashfn = args.algo if args.algo_arg is None else args.algo_arg
  # reject unknown hashes before asking for any secrets
  if hashfn not in ALGORITHMS:
    raise UnknownAlgorithm(hashfn)
  if verbose:
    print(f"algo: {hashfn}", file=sys.stderr)

  pwd = getpwd("New secure password: ")
  salt = getpwd("A random salt (at least 8 bytes): ")
  try:
    ret = kdf.hash_password(pwd, salt, hashfn)
  finally:
    wipe(pwd)
    wipe(salt)
  output("Password encrypted:", ret, args.quiet)
  return ret

commands = {'gen': gen, 'cgen': gen, 'enc': enc}

def usage(params, help=False):
  print("usage:")
  print("       %s [-l <length>] [-d <digits>] [-s <symbols>] [--no-uppercase] [--repeat] [-q] [<length>]" % params[0])
  print("       %s gen [-l <length>] [--no-digits] [--no-symbols] [--no-uppercase] [--repeat] [-q] [<length>]" % params[0])
  print("       %s cgen [-l <length>] [-d <digits>] [-s <symbols>] [--no-uppercase] [--repeat] [-q] [<length>]" % params[0])
  print("       echo -n 'password\\nsalt' | %s enc [-a <%s>] [-q] [<hash function>]" % (params[0], '|'.join(ALGORITHMS)))
  print("       %s --version" % params[0])
  print("       %s <command> -h" % params[0])
  if help: sys.exit(0)
  sys.exit(100)

#### main ####

def main(params=sys.argv):
  cmd = None
  argv = params[1:]
  if argv:
    if argv[0] in ('help', '-h', '--help'):
      usage(params, True)
    if argv[0] == '--version':
      print(f"rpasswd {get_version()}")
      return
    if argv[0] in commands:
      cmd = argv[0]
      argv = argv[1:]

  args = get_parser(params[0], cmd).parse_args(argv)
  try:
    commands.get(cmd, gen)(args)
  except RPasswdError as exc:
    print(f"error: {exc}", file=sys.stderr)
    sys.exit(1)

if __name__ == '__main__':
  main(sys.argv)
