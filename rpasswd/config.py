#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2023, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

import os, sys, tomllib

def cfgpaths(name):
  return [
      # read global cfg
      f'/etc/{name}/config',
      # update with per-user configs
      os.path.expanduser(f"~/.{name}rc"),
      # over-ride with local directory config
      os.path.expanduser(f"~/.config/{name}/config"),
      os.path.expanduser(f"{name}.cfg")
  ]

def getcfg(name, paths=None):
  if paths is None: paths = cfgpaths(name)
  config = dict()
  for path in paths:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        continue
    except tomllib.TOMLDecodeError as ex:
        print(f"error in {path} at {ex}", file=sys.stderr)
        continue
    for section, values in data.items():
      if isinstance(values, dict) and isinstance(config.get(section), dict):
        config[section].update(values)
      else:
        config[section] = values
  return config


if __name__ == '__main__':
  print(getcfg('rpasswd'))
