"""
safesdl - context.py
Library context and subsystem guards

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import ctypes
import logging
import weakref
import itertools

from .native import load_library
from .native import types as sdl
from .base import EnvironmentCache, subsystems
from .error import get_error, NotInitialised, AlreadyInitialised, SubsystemInUse
from .events import decode_event
from .video import WindowBuilder


# subsystem names
VIDEO = 'video'
AUDIO = 'audio'
TIMER = 'timer'
JOYSTICK = 'joystick'
CDROM = 'cdrom'
EVENTTHREAD = 'eventthread'

MASKS = {
    VIDEO: sdl.SDL_INIT_VIDEO,
    AUDIO: sdl.SDL_INIT_AUDIO,
    TIMER: sdl.SDL_INIT_TIMER,
    JOYSTICK: sdl.SDL_INIT_JOYSTICK,
    CDROM: sdl.SDL_INIT_CDROM,
    EVENTTHREAD: sdl.SDL_INIT_EVENTTHREAD,
}

# weak reference to the live context, if any
_current = None


def init(lib=None, driver=None):
    """
    Initialise the library and return the context.
    Only one context can be live in a process; a second call raises AlreadyInitialised.
    `lib` is the function table to use, by default the one bound to the shared library.
    `driver` sets the SDL_VIDEODRIVER environment variable for the lifetime of the context.
    """
    return SDL(lib, driver)


def current():
    """The live library context, or None."""
    context = _current() if _current is not None else None
    if context is not None and context.active:
        return context
    return None


class SDL(object):
    """
    Library context: owns the fact that the library is initialised.
    Created by init(); at most one can be live at a time. Quitting the context first
    closes any subsystem guards it issued, so the global quit always comes after
    their subsystem quits.
    """

    def __init__(self, lib=None, driver=None):
        """Initialise the library; refuse if another context is live."""
        global _current
        self.active = False
        if current() is not None:
            raise AlreadyInitialised('library context is already live')
        if lib is None:
            lib = load_library()
        env = EnvironmentCache(SDL_VIDEODRIVER=driver) if driver else EnvironmentCache()
        if lib.SDL_Init(0):
            # read the error slot before anything else happens
            error = get_error(lib)
            env.close()
            raise error
        self._lib = lib
        self._env = env
        # live guards by subsystem name; guards keep the context alive, not vice versa
        self._guards = weakref.WeakValueDictionary()
        self._serial = itertools.count()
        self.active = True
        _current = weakref.ref(self)
        logging.debug('SDL initialised')

    def __repr__(self):
        return '<SDL context %s>' % ('active' if self.active else 'closed',)

    def __copy__(self):
        raise TypeError('library context cannot be copied')

    def __deepcopy__(self, memo):
        raise TypeError('library context cannot be copied')

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        """Context guard."""
        self.quit()

    def __del__(self):
        """Quit the library when the context is collected."""
        self.quit()

    @property
    def lib(self):
        """Function table of the library."""
        if not self.active:
            raise NotInitialised('library context has been closed')
        return self._lib

    def quit(self):
        """Close all live guards, newest first, then quit the library."""
        if not getattr(self, 'active', False):
            return
        guards = sorted(self._guards.values(), key=lambda _g: _g.serial, reverse=True)
        for guard in guards:
            guard.close()
        self.active = False
        self._lib.SDL_Quit()
        self._env.close()
        logging.debug('SDL quit')

    close = quit

    # subsystems

    def subsystem(self, name):
        """Initialise a subsystem and return its guard."""
        try:
            cls = subsystems[name]
        except KeyError:
            raise ValueError('unknown subsystem `%s`' % (name,))
        return cls(self)

    def video(self):
        """Initialise the video subsystem."""
        return self.subsystem(VIDEO)

    def audio(self):
        """Initialise the audio subsystem."""
        return self.subsystem(AUDIO)

    def timer(self):
        """Initialise the timer subsystem."""
        return self.subsystem(TIMER)

    def joystick(self):
        """Initialise the joystick subsystem."""
        return self.subsystem(JOYSTICK)

    def cdrom(self):
        """Initialise the cd-rom subsystem."""
        return self.subsystem(CDROM)

    def event_thread(self):
        """Initialise the event thread."""
        return self.subsystem(EVENTTHREAD)

    def was_init(self, name=None):
        """Subsystem is initialised according to the library; bitmask of all if no name given."""
        if name is None:
            return self.lib.SDL_WasInit(sdl.SDL_INIT_EVERYTHING)
        try:
            mask = MASKS[name]
        except KeyError:
            raise ValueError('unknown subsystem `%s`' % (name,))
        return bool(self.lib.SDL_WasInit(mask))

    def guard(self, name):
        """Live guard for the named subsystem, or None."""
        return self._guards.get(name)

    def _attach(self, guard):
        """Track a newly initialised guard."""
        guard.serial = next(self._serial)
        self._guards[guard.name] = guard

    def _detach(self, guard):
        """Stop tracking a closed guard."""
        if self._guards.get(guard.name) is guard:
            del self._guards[guard.name]

    # events

    def poll_event(self, user_decoder=None):
        """Take one event from the queue and decode it; None if the queue is empty."""
        raw = sdl.SDL_Event()
        if self.lib.SDL_PollEvent(ctypes.pointer(raw)):
            return decode_event(raw, user_decoder)
        return None

    def wait_event(self, user_decoder=None):
        """Block until an event arrives, then decode it."""
        lib = self.lib
        raw = sdl.SDL_Event()
        if not lib.SDL_WaitEvent(ctypes.pointer(raw)):
            raise get_error(lib)
        return decode_event(raw, user_decoder)

    def events(self, user_decoder=None):
        """Iterate over decoded events until the queue is empty."""
        while True:
            event = self.poll_event(user_decoder)
            if event is None:
                return
            yield event


###############################################################################
# subsystem guards

class Subsystem(object):
    """
    Guard owning the fact that a subsystem is initialised.
    Construction needs a live library context; closing quits the subsystem exactly once.
    """

    name = None

    def __init__(self, context):
        """Initialise the subsystem."""
        self.active = False
        if not isinstance(context, SDL) or not context.active:
            raise NotInitialised('%s subsystem needs a live library context' % (self.name,))
        if context.guard(self.name) is not None:
            raise SubsystemInUse('%s subsystem already has a live guard' % (self.name,))
        lib = context.lib
        if lib.SDL_InitSubSystem(self.mask):
            raise get_error(lib)
        # hold on to the context so it can't be collected before we are
        self._context = context
        self.active = True
        context._attach(self)
        logging.debug('SDL %s subsystem initialised', self.name)

    @property
    def mask(self):
        """Init bitmask of the subsystem."""
        return MASKS[self.name]

    @property
    def context(self):
        """Library context this guard belongs to."""
        return self._context

    @property
    def lib(self):
        """Function table of the library."""
        if not self.active:
            raise NotInitialised('%s subsystem has been closed' % (self.name,))
        return self._context.lib

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, 'active' if self.active else 'closed')

    def __copy__(self):
        raise TypeError('subsystem guard cannot be copied')

    def __deepcopy__(self, memo):
        raise TypeError('subsystem guard cannot be copied')

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        """Context guard."""
        self.close()

    def __del__(self):
        """Quit the subsystem when the guard is collected."""
        self.close()

    def close(self):
        """Quit the subsystem, if not done already."""
        if not getattr(self, 'active', False):
            return
        self._release()
        self.active = False
        # after the global quit there is nothing left to tear down
        if self._context.active:
            self._context._lib.SDL_QuitSubSystem(self.mask)
            self._context._detach(self)
        logging.debug('SDL %s subsystem quit', self.name)

    def _release(self):
        """Release resources depending on the subsystem."""


@subsystems.register(VIDEO)
class VideoSubsystem(Subsystem):
    """Guard for the video subsystem."""

    def __init__(self, context):
        """Initialise the video subsystem."""
        self._surfaces = weakref.WeakSet()
        Subsystem.__init__(self, context)

    def window(self, title, width, height):
        """Start building a window; nothing happens until build() is called."""
        return WindowBuilder(self, title, width, height)

    def _adopt(self, surface):
        """Track a surface created on this subsystem."""
        self._surfaces.add(surface)

    def _release(self):
        """Free surfaces still open; the subsystem quit would invalidate them."""
        for surface in list(self._surfaces):
            surface.close()


@subsystems.register(AUDIO)
class AudioSubsystem(Subsystem):
    """Guard for the audio subsystem."""


@subsystems.register(TIMER)
class TimerSubsystem(Subsystem):
    """Guard for the timer subsystem."""

    def delay(self, ms):
        """Block the calling thread for at least `ms` milliseconds."""
        self.lib.SDL_Delay(ms)

    def ticks(self):
        """Milliseconds since the library was initialised."""
        return self.lib.SDL_GetTicks()


@subsystems.register(JOYSTICK)
class JoystickSubsystem(Subsystem):
    """Guard for the joystick subsystem."""

    def count(self):
        """Number of joysticks attached."""
        return self.lib.SDL_NumJoysticks()


@subsystems.register(CDROM)
class CDROMSubsystem(Subsystem):
    """Guard for the cd-rom subsystem."""

    def count(self):
        """Number of cd-rom drives."""
        lib = self.lib
        drives = lib.SDL_CDNumDrives()
        if drives < 0:
            raise get_error(lib)
        return drives


@subsystems.register(EVENTTHREAD)
class EventThreadSubsystem(Subsystem):
    """Guard for the event thread."""
