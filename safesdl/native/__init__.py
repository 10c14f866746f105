"""
safesdl - native package
ctypes view of the SDL 1.2 C interface

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from .dll import DLL, DLLWarning, load_dll
from .library import Library, load_library
