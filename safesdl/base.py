"""
safesdl - base.py
Utility classes

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import logging


class SubsystemRegister(object):
    """Register of guard classes by subsystem name."""

    def __init__(self):
        """Initialise register."""
        self._classes = {}

    def register(self, name):
        """Decorator to register a guard class."""
        def decorated_guard(cls):
            cls.name = name
            self._classes[name] = cls
            return cls
        return decorated_guard

    def __getitem__(self, name):
        """Retrieve guard class."""
        return self._classes[name]

    def __contains__(self, name):
        """Subsystem name is registered."""
        return name in self._classes

    def __iter__(self):
        """Iterate over subsystem names."""
        return iter(self._classes)


class EnvironmentCache(object):
    """Environment variables set for the lifetime of a library context."""

    def __init__(self, **variables):
        """Set the given variables, remembering the values they replace."""
        self._saved = {}
        for key, value in variables.items():
            self.set(key, value)

    def __repr__(self):
        return '<EnvironmentCache %s>' % (', '.join(sorted(self._saved)),)

    def __contains__(self, key):
        """Variable has been set through this cache."""
        return key in self._saved

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        """Context guard."""
        self.close()

    def __del__(self):
        """Restore the environment when collected."""
        self.close()

    def set(self, key, value):
        """Set a variable; a later restore gives back the value from before the first set."""
        if key not in self._saved:
            self._saved[key] = os.environ.get(key)
        os.environ[key] = value
        logging.debug('Environment: %s=%s', key, value)

    def restore(self, key):
        """Give the variable back its original value, or remove it if it had none."""
        original = self._saved.pop(key)
        if original is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original

    def close(self):
        """Restore all variables."""
        for key in list(getattr(self, '_saved', ())):
            self.restore(key)


###############################################################################
# subsystem register

subsystems = SubsystemRegister()
