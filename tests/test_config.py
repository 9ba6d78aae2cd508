#!/usr/bin/env python3
"""
Tests for StreamConfig.
"""

import unittest
from stringstream import StreamConfig
from stringstream.config import config


class TestStreamConfig(unittest.TestCase):
    """Singleton configuration."""

    def tearDown(self):
        StreamConfig.set_defaults(max_buffer_size=None)

    def test_singleton(self):
        self.assertIs(StreamConfig.get_instance(), config)
        self.assertGreater(config.memory_limit, 0)

    def test_set_defaults(self):
        StreamConfig.set_defaults(max_buffer_size=128, not_a_setting=True)
        self.assertEqual(config.max_buffer_size, 128)
        self.assertFalse(hasattr(config, "not_a_setting"))

    def test_check_size(self):
        self.assertTrue(config.check_size(10 ** 12))

        StreamConfig.set_defaults(max_buffer_size=128)
        self.assertTrue(config.check_size(128))
        self.assertFalse(config.check_size(129))

    def test_format_bytes(self):
        self.assertEqual(config.format_bytes(512), "512.00 B")
        self.assertEqual(config.format_bytes(2048), "2.00 KB")
        self.assertEqual(config.format_bytes(3 * 1024 ** 2), "3.00 MB")


if __name__ == "__main__":
    unittest.main()
