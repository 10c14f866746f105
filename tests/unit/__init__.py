"""
safesdl tests.unit
unit tests

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import sys

# make safesdl package accessible
HERE = os.path.dirname(os.path.abspath(__file__))
sys.path = [os.path.join(HERE, '..', '..')] + sys.path


# unittest verbosity, increase for more info on what is running
VERBOSITY = 1


def run_unit_tests():
    """Discover and run the unit tests; return True if all passed."""
    import unittest
    sys.stderr.write('Running unit tests: ')
    suite = unittest.loader.defaultTestLoader.discover(HERE, 'test*.py', None)
    runner = unittest.TextTestRunner(verbosity=VERBOSITY)
    return runner.run(suite).wasSuccessful()
