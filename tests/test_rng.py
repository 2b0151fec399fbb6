#!/usr/bin/env python3

import unittest
from unittest.mock import patch
from rpasswd import rng
from rpasswd.errors import EntropyFailure

# to get coverage, run
# PYTHONPATH=.. coverage run ../tests/test_rng.py
# coverage report -m
# to just run the tests do
# python3 -m unittest discover --start-directory ../tests

def word(v):
  return v.to_bytes(rng.WORD_SIZE, 'big')

class TestRandInt(unittest.TestCase):
    def test_range(self):
      for n in (1, 2, 10, 26, 30, 52, 1000):
        for _ in range(200):
          v = rng.rand_int(n)
          self.assertGreaterEqual(v, 0)
          self.assertLess(v, n)

    def test_one(self):
      self.assertEqual(rng.rand_int(1), 0)

    def test_invalid(self):
      self.assertRaises(ValueError, rng.rand_int, 0)
      self.assertRaises(ValueError, rng.rand_int, -5)
      self.assertRaises(ValueError, rng.rand_int, rng.WORD_SPACE + 1)

    def test_rejects_biased_words(self):
      # 2**32 % 30 == 16, so the top 16 words must be thrown away
      limit = rng.WORD_SPACE - 16
      with patch('rpasswd.rng.randombytes', side_effect=[word(0xffffffff), word(limit), word(31)]) as src:
        self.assertEqual(rng.rand_int(30), 1)
        self.assertEqual(src.call_count, 3)

    def test_accepts_below_limit(self):
      limit = rng.WORD_SPACE - 16
      with patch('rpasswd.rng.randombytes', side_effect=[word(limit - 1)]):
        self.assertEqual(rng.rand_int(30), (limit - 1) % 30)

    def test_power_of_two_never_rejects(self):
      with patch('rpasswd.rng.randombytes', side_effect=[word(0xffffffff)]):
        self.assertEqual(rng.rand_int(16), 15)

    def test_entropy_failure(self):
      with patch('rpasswd.rng.pysodium.randombytes', side_effect=ValueError("no entropy")):
        with self.assertRaises(EntropyFailure) as ctx:
          rng.rand_int(10)
      self.assertIsInstance(ctx.exception.__cause__, ValueError)

class TestShuffle(unittest.TestCase):
    def test_permutation(self):
      seq = list("abcdefghijklmnopqrstuvwxyz")
      res = rng.shuffle(list(seq))
      self.assertEqual(sorted(res), seq)

    def test_in_place(self):
      seq = [1, 2, 3, 4]
      self.assertIs(rng.shuffle(seq), seq)

    def test_trivial(self):
      self.assertEqual(rng.shuffle([]), [])
      self.assertEqual(rng.shuffle(['x']), ['x'])

    def test_choice(self):
      for _ in range(100):
        self.assertIn(rng.choice("xyz"), "xyz")

if __name__ == '__main__':
    unittest.main()
