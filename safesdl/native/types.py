"""
safesdl - native.types
C types, structures and constants of the SDL 1.2 ABI

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from ctypes import c_int, c_int8, c_uint8, c_int16, c_uint16, c_int32, c_uint32
from ctypes import c_void_p, c_uint
from ctypes import Structure, Union, POINTER

# this module must not bind any function, so it can be used without the shared library


# stdinc

SDL_FALSE = 0
SDL_TRUE = 1

SDL_bool = c_int
Sint8 = c_int8
Uint8 = c_uint8
Sint16 = c_int16
Uint16 = c_uint16
Sint32 = c_int32
Uint32 = c_uint32


# init masks

SDL_INIT_TIMER = 0x00000001
SDL_INIT_AUDIO = 0x00000010
SDL_INIT_VIDEO = 0x00000020
SDL_INIT_CDROM = 0x00000100
SDL_INIT_JOYSTICK = 0x00000200
SDL_INIT_NOPARACHUTE = 0x00100000
SDL_INIT_EVENTTHREAD = 0x01000000
SDL_INIT_EVERYTHING = 0x0000FFFF


# error codes, as set by SDL_Error()

SDL_ENOMEM = 0
SDL_EFREAD = 1
SDL_EFWRITE = 2
SDL_EFSEEK = 3
SDL_UNSUPPORTED = 4
SDL_LASTERROR = 5
SDL_errorcode = c_int


# video flags

SDL_SWSURFACE = 0x00000000
SDL_HWSURFACE = 0x00000001
SDL_ASYNCBLIT = 0x00000004
SDL_ANYFORMAT = 0x10000000
SDL_HWPALETTE = 0x20000000
SDL_DOUBLEBUF = 0x40000000
SDL_FULLSCREEN = 0x80000000
SDL_OPENGL = 0x00000002
SDL_OPENGLBLIT = 0x0000000A
SDL_RESIZABLE = 0x00000010
SDL_NOFRAME = 0x00000020


# event discriminants

SDL_NOEVENT = 0
SDL_ACTIVEEVENT = 1
SDL_KEYDOWN = 2
SDL_KEYUP = 3
SDL_MOUSEMOTION = 4
SDL_MOUSEBUTTONDOWN = 5
SDL_MOUSEBUTTONUP = 6
SDL_JOYAXISMOTION = 7
SDL_JOYBALLMOTION = 8
SDL_JOYHATMOTION = 9
SDL_JOYBUTTONDOWN = 10
SDL_JOYBUTTONUP = 11
SDL_QUIT = 12
SDL_SYSWMEVENT = 13
SDL_EVENT_RESERVEDA = 14
SDL_EVENT_RESERVEDB = 15
SDL_VIDEORESIZE = 16
SDL_VIDEOEXPOSE = 17
# 18--23 reserved
SDL_USEREVENT = 24
SDL_NUMEVENTS = 32

# active event state bits
SDL_APPMOUSEFOCUS = 0x01
SDL_APPINPUTFOCUS = 0x02
SDL_APPACTIVE = 0x04

# key and button states
SDL_RELEASED = 0
SDL_PRESSED = 1

# mouse buttons
SDL_BUTTON_LEFT = 1
SDL_BUTTON_MIDDLE = 2
SDL_BUTTON_RIGHT = 3
SDL_BUTTON_WHEELUP = 4
SDL_BUTTON_WHEELDOWN = 5
SDL_BUTTON_X1 = 6
SDL_BUTTON_X2 = 7


# video.h

class SDL_Rect(Structure):
    _fields_ = [("x", Sint16), ("y", Sint16),
                ("w", Uint16), ("h", Uint16)]


class SDL_Color(Structure):
    # the fourth byte is called `unused` in 1.2 but carries alpha where it matters
    _fields_ = [("r", Uint8),
                ("g", Uint8),
                ("b", Uint8),
                ("unused", Uint8),
                ]

    def __repr__(self):
        return "SDL_Color(r=%d, g=%d, b=%d, unused=%d)" % (
            self.r, self.g, self.b, self.unused
        )


class SDL_Palette(Structure):
    _fields_ = [("ncolors", c_int),
                ("colors", POINTER(SDL_Color))]


class SDL_PixelFormat(Structure):
    _fields_ = [("palette", POINTER(SDL_Palette)),
                ("BitsPerPixel", Uint8),
                ("BytesPerPixel", Uint8),
                ("Rloss", Uint8),
                ("Gloss", Uint8),
                ("Bloss", Uint8),
                ("Aloss", Uint8),
                ("Rshift", Uint8),
                ("Gshift", Uint8),
                ("Bshift", Uint8),
                ("Ashift", Uint8),
                ("Rmask", Uint32),
                ("Gmask", Uint32),
                ("Bmask", Uint32),
                ("Amask", Uint32),
                ("colorkey", Uint32),
                ("alpha", Uint8)]


class SDL_Surface(Structure):
    _fields_ = [("flags", Uint32),
                ("format", POINTER(SDL_PixelFormat)),
                ("w", c_int), ("h", c_int),
                ("pitch", Uint16),
                ("pixels", c_void_p),
                ("offset", c_int),
                ("hwdata", c_void_p),
                ("clip_rect", SDL_Rect),
                ("unused1", Uint32),
                ("locked", Uint32),
                ("map", c_void_p),
                ("format_version", c_uint),
                ("refcount", c_int)
               ]


# keyboard.h

SDLKey = c_int
SDLMod = c_int

class SDL_keysym(Structure):
    _fields_ = [("scancode", Uint8),
                ("sym", SDLKey),
                ("mod", SDLMod),
                ("unicode", Uint16)]


# events.h

class SDL_ActiveEvent(Structure):
    _fields_ = [("type", Uint8),
                ("gain", Uint8),
                ("state", Uint8)]

class SDL_KeyboardEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("state", Uint8),
                ("keysym", SDL_keysym)]

class SDL_MouseMotionEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("state", Uint8),
                ("x", Uint16), ("y", Uint16),
                ("xrel", Sint16), ("yrel", Sint16)]

class SDL_MouseButtonEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("button", Uint8),
                ("state", Uint8),
                ("x", Uint16), ("y", Uint16)]

class SDL_JoyAxisEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("axis", Uint8),
                ("value", Sint16)]

class SDL_JoyBallEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("ball", Uint8),
                ("xrel", Sint16), ("yrel", Sint16)]

class SDL_JoyHatEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("hat", Uint8),
                ("value", Uint8)]

class SDL_JoyButtonEvent(Structure):
    _fields_ = [("type", Uint8),
                ("which", Uint8),
                ("button", Uint8),
                ("state", Uint8)]

class SDL_ResizeEvent(Structure):
    _fields_ = [("type", Uint8),
                ("w", c_int), ("h", c_int)]

class SDL_ExposeEvent(Structure):
    _fields_ = [("type", Uint8)]

class SDL_QuitEvent(Structure):
    _fields_ = [("type", Uint8)]

class SDL_UserEvent(Structure):
    _fields_ = [("type", Uint8),
                ("code", c_int),
                ("data1", c_void_p),
                ("data2", c_void_p)]

class SDL_SysWMEvent(Structure):
    _fields_ = [("type", Uint8),
                ("msg", c_void_p)]

class SDL_Event(Union):
    _fields_ = [("type", Uint8),
                ("active", SDL_ActiveEvent),
                ("key", SDL_KeyboardEvent),
                ("motion", SDL_MouseMotionEvent),
                ("button", SDL_MouseButtonEvent),
                ("jaxis", SDL_JoyAxisEvent),
                ("jball", SDL_JoyBallEvent),
                ("jhat", SDL_JoyHatEvent),
                ("jbutton", SDL_JoyButtonEvent),
                ("resize", SDL_ResizeEvent),
                ("expose", SDL_ExposeEvent),
                ("quit", SDL_QuitEvent),
                ("user", SDL_UserEvent),
                ("syswm", SDL_SysWMEvent),
                ]
