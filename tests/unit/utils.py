"""
safesdl tests.utils
Shared testing utilities

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import gc
import unittest
from unittest import main as run_tests

import safesdl
from .fakesdl import FakeSDL


class TestCase(unittest.TestCase):
    """Base class for test cases, with a fresh fake library for every test."""

    def setUp(self):
        """Create the fake library."""
        self.lib = FakeSDL()

    def tearDown(self):
        """Make sure no context outlives the test."""
        gc.collect()
        context = safesdl.current()
        if context is not None:
            context.quit()

    def init(self, **kwargs):
        """Initialise a context on the fake library."""
        return safesdl.init(self.lib, **kwargs)
