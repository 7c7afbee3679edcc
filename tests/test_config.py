"""
Tests for scanner configuration.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from mathlang.lexer.config import ScannerConfig, NumericMode, NUMERIC_MODE_ENV
from mathlang.lexer.scanner import Scanner


class TestScannerConfig(unittest.TestCase):

    def test_default_is_single_digit(self):
        self.assertEqual(ScannerConfig().numeric_mode, NumericMode.SINGLE_DIGIT)
        self.assertEqual(Scanner("").config.numeric_mode, NumericMode.SINGLE_DIGIT)

    def test_from_env_unset(self):
        self.assertEqual(ScannerConfig.from_env({}), ScannerConfig())

    def test_from_env_empty(self):
        self.assertEqual(ScannerConfig.from_env({NUMERIC_MODE_ENV: "  "}), ScannerConfig())

    def test_from_env_greedy(self):
        config = ScannerConfig.from_env({NUMERIC_MODE_ENV: "Greedy"})
        self.assertEqual(config.numeric_mode, NumericMode.GREEDY)

    def test_from_env_single_digit(self):
        config = ScannerConfig.from_env({NUMERIC_MODE_ENV: "single-digit"})
        self.assertEqual(config.numeric_mode, NumericMode.SINGLE_DIGIT)

    def test_from_env_unknown_mode(self):
        with self.assertRaises(ValueError) as ctx:
            ScannerConfig.from_env({NUMERIC_MODE_ENV: "decimal"})
        self.assertIn("greedy", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
