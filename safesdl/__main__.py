"""
safesdl - ownership-safe layer over the SDL 1.2 multimedia library

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .main import main, script_entry_point_guard

with script_entry_point_guard():
    sys.exit(main())
