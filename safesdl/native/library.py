"""
safesdl - native.library
Function table bound to the SDL 1.2 shared library

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from ctypes import c_int, c_char_p, POINTER

from .types import Uint32, SDL_Surface, SDL_Event
from .dll import load_dll


class Library(object):
    """
    The entry points used by safesdl, bound by their C names.
    Any object with the same attributes can stand in for this table.
    """

    def __init__(self, dll):
        """Bind the functions."""
        self.dll = dll
        _bind = dll.bind_function
        # SDL.h
        self.SDL_Init = _bind('SDL_Init', [Uint32], c_int)
        self.SDL_InitSubSystem = _bind('SDL_InitSubSystem', [Uint32], c_int)
        self.SDL_QuitSubSystem = _bind('SDL_QuitSubSystem', [Uint32])
        self.SDL_WasInit = _bind('SDL_WasInit', [Uint32], Uint32)
        self.SDL_Quit = _bind('SDL_Quit')
        # SDL_error.h
        self.SDL_GetError = _bind('SDL_GetError', None, c_char_p)
        self.SDL_ClearError = _bind('SDL_ClearError')
        # SDL_video.h
        self.SDL_SetVideoMode = _bind(
            'SDL_SetVideoMode', [c_int, c_int, c_int, Uint32], POINTER(SDL_Surface)
        )
        self.SDL_WM_SetCaption = _bind('SDL_WM_SetCaption', [c_char_p, c_char_p])
        self.SDL_Flip = _bind('SDL_Flip', [POINTER(SDL_Surface)], c_int)
        self.SDL_FreeSurface = _bind('SDL_FreeSurface', [POINTER(SDL_Surface)])
        # SDL_events.h
        self.SDL_PollEvent = _bind('SDL_PollEvent', [POINTER(SDL_Event)], c_int)
        self.SDL_WaitEvent = _bind('SDL_WaitEvent', [POINTER(SDL_Event)], c_int)
        # SDL_timer.h
        self.SDL_GetTicks = _bind('SDL_GetTicks', None, Uint32)
        self.SDL_Delay = _bind('SDL_Delay', [Uint32])
        # SDL_joystick.h, SDL_cdrom.h
        self.SDL_NumJoysticks = _bind('SDL_NumJoysticks', None, c_int)
        # cdrom support may be compiled out of the library
        self.SDL_CDNumDrives = _bind('SDL_CDNumDrives', None, c_int, optfunc=_no_cdrom)

    @property
    def libfile(self):
        """Filename of the loaded library."""
        return self.dll.libfile


def _no_cdrom():
    """Report zero drives when cdrom support is absent."""
    return 0


# process-wide function table, loaded on first use
_library = None


def load_library(*library_paths):
    """Load the shared library once and return its function table."""
    global _library
    if _library is None:
        _library = Library(load_dll(*library_paths))
    return _library
