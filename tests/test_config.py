#!/usr/bin/env python3

import unittest
from os import path
from shutil import rmtree
from tempfile import mkdtemp
from unittest.mock import patch
from rpasswd import config

class TestConfig(unittest.TestCase):
    def setUp(self):
      self.root = mkdtemp(prefix='rpasswd-cfg.')

    def tearDown(self):
      rmtree(self.root)

    def write(self, name, content):
      p = path.join(self.root, name)
      with open(p, 'w') as fd:
        fd.write(content)
      return p

    def test_missing(self):
      self.assertEqual(config.getcfg('rpasswd', [path.join(self.root, 'nope')]), {})

    def test_override(self):
      a = self.write('a', '[rpasswd]\nlength = 20\nalgo = "scrypt"\n')
      b = self.write('b', '[rpasswd]\nlength = 32\nverbose = true\n')
      cfg = config.getcfg('rpasswd', [a, path.join(self.root, 'nope'), b])
      self.assertEqual(cfg['rpasswd'], {'length': 32, 'algo': 'scrypt', 'verbose': True})

    def test_broken_file_skipped(self):
      a = self.write('a', '[rpasswd]\nquiet = true\n')
      b = self.write('b', '[rpasswd\nquiet = ')
      with patch('rpasswd.config.print', create=True) as out:
        cfg = config.getcfg('rpasswd', [a, b])
      self.assertEqual(cfg, {'rpasswd': {'quiet': True}})
      self.assertTrue(out.called)

    def test_paths(self):
      paths = config.cfgpaths('rpasswd')
      self.assertEqual(paths[0], '/etc/rpasswd/config')
      self.assertTrue(paths[-1].endswith('rpasswd.cfg'))

if __name__ == '__main__':
    unittest.main()
