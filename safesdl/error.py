"""
safesdl - error.py
Error translation and exceptions

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from .native.types import SDL_ENOMEM, SDL_EFREAD, SDL_EFWRITE, SDL_EFSEEK, SDL_UNSUPPORTED


# error code constants
ENOMEM = SDL_ENOMEM
EFREAD = SDL_EFREAD
EFWRITE = SDL_EFWRITE
EFSEEK = SDL_EFSEEK
UNSUPPORTED = SDL_UNSUPPORTED

# messages the library writes to the error slot on SDL_Error(code)
# note that SDL 1.2 reports SDL_UNSUPPORTED as an unknown error
NATIVE_MESSAGES = {
    b'Out of memory': ENOMEM,
    b'Error reading from datastream': EFREAD,
    b'Error writing to datastream': EFWRITE,
    b'Error seeking in datastream': EFSEEK,
    b'Unknown SDL error': UNSUPPORTED,
}


###############################################################################
# library errors

class SDLError(Exception):
    """Failure reported by the library."""

    message = u''

    def __str__(self):
        """String representation of exception."""
        return self.message


class ErrorCode(SDLError):
    """Failure with one of the library's fixed error codes."""

    messages = {
        ENOMEM: u'out of memory',
        EFREAD: u'error reading from datastream',
        EFWRITE: u'error writing to datastream',
        EFSEEK: u'error seeking in datastream',
        UNSUPPORTED: u'unknown SDL error',
    }

    def __init__(self, code):
        """Initialise error."""
        if code not in self.messages:
            raise ValueError('not a known error code: %r' % (code,))
        SDLError.__init__(self, code)
        self.code = code
        self.message = u'error code: %s' % (self.messages[code],)

    def __repr__(self):
        """Representation of exception."""
        return 'ErrorCode(%d)' % (self.code,)

    def __eq__(self, other):
        return isinstance(other, ErrorCode) and self.code == other.code

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((ErrorCode, self.code))


class OtherError(SDLError):
    """Failure described only by the library's message text."""

    def __init__(self, text):
        """Initialise error."""
        SDLError.__init__(self, text)
        self.text = text
        self.message = u'unknown error: %s' % (text,)

    def __repr__(self):
        """Representation of exception."""
        return 'OtherError(%r)' % (self.text,)

    def __eq__(self, other):
        return isinstance(other, OtherError) and self.text == other.text

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((OtherError, self.text))


def translate_error(code, text):
    """Convert an error code and message text into a library error."""
    if code in ErrorCode.messages:
        return ErrorCode(code)
    return OtherError(text)


def get_error(lib):
    """
    Read the library's global error slot and return the matching error.
    The slot is overwritten by any later library call on this thread, so this must
    be called right after the failing call and before anything else touches the library.
    """
    raw = lib.SDL_GetError()
    if not raw:
        raw = b''
    elif not isinstance(raw, bytes):
        raw = raw.encode('utf-8', 'replace')
    return translate_error(NATIVE_MESSAGES.get(raw), raw.decode('utf-8', 'replace'))


def clear_error(lib):
    """Empty the global error slot."""
    lib.SDL_ClearError()


###############################################################################
# precondition errors, raised before any library call

class LifecycleError(Exception):
    """Library or subsystem used out of order."""


class NotInitialised(LifecycleError):
    """The context or guard has already been closed."""


class AlreadyInitialised(LifecycleError):
    """A live library context already exists in this process."""


class SubsystemInUse(LifecycleError):
    """A live guard for this subsystem already exists."""


class WindowBuildError(Exception):
    """Window could not be built."""


class InvalidTitle(WindowBuildError):
    """Window title contains a NUL character."""

    def __init__(self, title):
        """Initialise error."""
        WindowBuildError.__init__(
            self, u'invalid window title: NUL at position %d' % (title.index(u'\0'),)
        )
        self.title = title


class WidthOverflows(WindowBuildError):
    """Window width does not fit a C int."""

    def __init__(self, width):
        """Initialise error."""
        WindowBuildError.__init__(self, u'window width overflow: %s' % (width,))
        self.width = width


class HeightOverflows(WindowBuildError):
    """Window height does not fit a C int."""

    def __init__(self, height):
        """Initialise error."""
        WindowBuildError.__init__(self, u'window height overflow: %s' % (height,))
        self.height = height


class SdlError(WindowBuildError):
    """The mode-set call failed."""

    def __init__(self, error):
        """Initialise error."""
        WindowBuildError.__init__(self, u'SDL error: %s' % (error,))
        self.error = error
