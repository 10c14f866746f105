"""
safesdl - video.py
Colours, window construction and surface ownership

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .native import types as sdl
from .error import get_error, NotInitialised
from .error import InvalidTitle, WidthOverflows, HeightOverflows, SdlError


# mode-set colour depth
DEPTH = 32

# largest size plus one that fits a C int
SIZE_LIMIT = 1 << 31


###############################################################################
# colours

class Color(object):
    """RGBA colour value."""

    __slots__ = ('_rgba',)

    def __init__(self, r, g, b, a=0xff):
        """Create a colour; channels must be in 0..255."""
        for channel in (r, g, b, a):
            if not 0 <= channel <= 0xff:
                raise ValueError('colour channel out of range: %r' % (channel,))
        self._rgba = (int(r), int(g), int(b), int(a))

    @classmethod
    def from_tuple(cls, rgba):
        """Colour from an (r, g, b) or (r, g, b, a) tuple."""
        return cls(*rgba)

    @classmethod
    def from_native(cls, color):
        """Colour from an SDL_Color; the unused byte holds alpha."""
        return cls(color.r, color.g, color.b, color.unused)

    @classmethod
    def from_packed(cls, value):
        """Colour from its big-endian 32-bit r,g,b,a packing."""
        return cls(*bytearray((value & 0xffffffff).to_bytes(4, 'big')))

    @property
    def r(self):
        return self._rgba[0]

    @property
    def g(self):
        return self._rgba[1]

    @property
    def b(self):
        return self._rgba[2]

    @property
    def a(self):
        return self._rgba[3]

    @property
    def rgb(self):
        """(r, g, b) tuple."""
        return self._rgba[:3]

    @property
    def rgba(self):
        """(r, g, b, a) tuple."""
        return self._rgba

    def invert(self):
        """Colour with all channels, alpha included, inverted."""
        return Color(*(0xff - _c for _c in self._rgba))

    def to_native(self):
        """SDL_Color with alpha in the unused byte."""
        return sdl.SDL_Color(self.r, self.g, self.b, self.a)

    def packed(self):
        """Big-endian 32-bit r,g,b,a packing."""
        return int.from_bytes(bytes(bytearray(self._rgba)), 'big')

    def __int__(self):
        return self.packed()

    def __iter__(self):
        return iter(self._rgba)

    def __eq__(self, other):
        return isinstance(other, Color) and self._rgba == other._rgba

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._rgba)

    def __repr__(self):
        return 'Color(r=%d, g=%d, b=%d, a=%d)' % self._rgba


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.GRAY = Color(128, 128, 128)
Color.GREY = Color.GRAY
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.MAGENTA = Color(255, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.CYAN = Color(0, 255, 255)


###############################################################################
# surfaces

class Surface(object):
    """
    Exclusive owner of one native surface handle.
    The surface holds on to the video subsystem guard it was built on, so the
    subsystem stays initialised for as long as the surface is open.
    """

    def __init__(self, video, handle):
        """Take ownership of a non-null surface handle issued by the video subsystem."""
        self.closed = True
        if not handle:
            raise ValueError('surface handle must not be null')
        self._video = video
        self._lib = video.lib
        self._handle = handle
        self.closed = False

    def __repr__(self):
        if self.closed:
            return '<Surface closed>'
        return '<Surface %dx%d>' % (self.width, self.height)

    def __copy__(self):
        raise TypeError('surface cannot be copied')

    def __deepcopy__(self, memo):
        raise TypeError('surface cannot be copied')

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        """Context guard."""
        self.close()

    def __del__(self):
        """Free the surface when collected."""
        self.close()

    def close(self):
        """Free the surface, if not done already."""
        if getattr(self, 'closed', True):
            return
        self.closed = True
        self._lib.SDL_FreeSurface(self._handle)

    @property
    def video(self):
        """Video subsystem guard the surface was built on."""
        return self._video

    @property
    def handle(self):
        """The native surface pointer, for pass-through calls."""
        self._check_open()
        return self._handle

    @property
    def width(self):
        return self.handle.contents.w

    @property
    def height(self):
        return self.handle.contents.h

    @property
    def pitch(self):
        return self.handle.contents.pitch

    @property
    def flags(self):
        return self.handle.contents.flags

    def flip(self):
        """Present the back buffer."""
        self._check_open()
        if self._lib.SDL_Flip(self._handle):
            raise get_error(self._lib)

    def _check_open(self):
        """Raise if the surface has been freed."""
        if self.closed:
            raise NotInitialised('surface has been freed')


###############################################################################
# window builder

class WindowBuilder(object):
    """
    Window configuration, turned into a mode-set by build().

    Each successful build() replaces the library's video mode. Surfaces from
    earlier builds still exist as objects, but the library no longer draws to them.
    """

    def __init__(self, video, title, width, height):
        """Capture the configuration; nothing is sent to the library yet."""
        self._video = video
        self.title = title
        self.width = width
        self.height = height
        self.window_flags = 0

    def __repr__(self):
        return '<WindowBuilder %r %sx%s flags=0x%08x>' % (
            self.title, self.width, self.height, self.window_flags
        )

    def flags(self, mask):
        """Add raw video flags."""
        self.window_flags |= mask
        return self

    def fullscreen(self):
        """Request a fullscreen mode."""
        return self.flags(sdl.SDL_FULLSCREEN)

    def opengl(self):
        """Request an OpenGL context."""
        return self.flags(sdl.SDL_OPENGL)

    def borderless(self):
        """Request a window without frame."""
        return self.flags(sdl.SDL_NOFRAME)

    def resizable(self):
        """Request a resizable window."""
        return self.flags(sdl.SDL_RESIZABLE)

    def _validate(self):
        """Check the configuration before any library call."""
        if u'\0' in self.title:
            raise InvalidTitle(self.title)
        if not 0 <= self.width < SIZE_LIMIT:
            raise WidthOverflows(self.width)
        if not 0 <= self.height < SIZE_LIMIT:
            raise HeightOverflows(self.height)
        if not self._video.active:
            raise NotInitialised('video subsystem has been closed')

    def build(self):
        """Set the video mode and return the owned display surface."""
        self._validate()
        lib = self._video.lib
        handle = lib.SDL_SetVideoMode(self.width, self.height, DEPTH, self.window_flags)
        if not handle:
            # read the error slot before any other library call overwrites it
            error = get_error(lib)
            raise SdlError(error) from error
        logging.debug(
            'Video mode set: %dx%d, flags 0x%08x', self.width, self.height, self.window_flags
        )
        # the caption call reports no failure
        lib.SDL_WM_SetCaption(self.title.encode('utf-8', errors='replace'), None)
        logging.debug('Window caption requested: %r', self.title)
        surface = Surface(self._video, handle)
        self._video._adopt(surface)
        return surface
