"""
safesdl - events.py
Decoding of raw event records into event values

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from .native import types as sdl


# active event states
MOUSE_ENTER = 'mouse_enter'
MOUSE_LEAVE = 'mouse_leave'
APP_FOCUSED = 'app_focused'
APP_UNFOCUSED = 'app_unfocused'
MINIMIZED = 'minimized'
RESTORED = 'restored'

# key and button states
KEY_DOWN = 'key_down'
KEY_UP = 'key_up'
BUTTON_DOWN = 'button_down'
BUTTON_UP = 'button_up'

# anything we have no name for
UNKNOWN = 'unknown'

# (state, gain) pairs of active events
# state is a bitmask; combined bits are not in the table and decode as unknown
ACTIVE_STATES = {
    (sdl.SDL_APPMOUSEFOCUS, 0): MOUSE_LEAVE,
    (sdl.SDL_APPMOUSEFOCUS, 1): MOUSE_ENTER,
    (sdl.SDL_APPINPUTFOCUS, 0): APP_UNFOCUSED,
    (sdl.SDL_APPINPUTFOCUS, 1): APP_FOCUSED,
    (sdl.SDL_APPACTIVE, 0): MINIMIZED,
    (sdl.SDL_APPACTIVE, 1): RESTORED,
}

KEY_STATES = {
    sdl.SDL_RELEASED: KEY_UP,
    sdl.SDL_PRESSED: KEY_DOWN,
}

BUTTON_STATES = {
    sdl.SDL_RELEASED: BUTTON_UP,
    sdl.SDL_PRESSED: BUTTON_DOWN,
}

BUTTON_NAMES = {
    sdl.SDL_BUTTON_LEFT: 'left',
    sdl.SDL_BUTTON_MIDDLE: 'middle',
    sdl.SDL_BUTTON_RIGHT: 'right',
    sdl.SDL_BUTTON_WHEELUP: 'wheel_up',
    sdl.SDL_BUTTON_WHEELDOWN: 'wheel_down',
    sdl.SDL_BUTTON_X1: 'x1',
    sdl.SDL_BUTTON_X2: 'x2',
}


###############################################################################
# event values

class Value(object):
    """Immutable value with named fields, compared by type and fields."""

    __slots__ = ()

    def __init__(self, *args):
        """Set the fields in order."""
        if len(args) != len(self.__slots__):
            raise TypeError('%s takes %d arguments (%d given)' % (
                type(self).__name__, len(self.__slots__), len(args)
            ))
        for name, value in zip(self.__slots__, args):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % (type(self).__name__,))

    def _astuple(self):
        return tuple(getattr(self, _name) for _name in self.__slots__)

    def __eq__(self, other):
        return type(self) is type(other) and self._astuple() == other._astuple()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self),) + self._astuple())

    def __repr__(self):
        return '%s(%s)' % (
            type(self).__name__,
            ', '.join('%s=%r' % (_name, getattr(self, _name)) for _name in self.__slots__)
        )


class Keysym(Value):
    """Key identification carried by keyboard events."""
    __slots__ = ('scancode', 'sym', 'mod', 'unicode')


class UserData(Value):
    """Default payload of a user event."""
    __slots__ = ('type', 'code', 'data1', 'data2')


class Event(Value):
    """Base class for decoded events."""
    __slots__ = ()


class Active(Event):
    """Focus, mouse-over or iconification change."""
    __slots__ = ('state',)


class Keyboard(Event):
    """Key pressed or released; keysym is None if the state is unknown."""
    __slots__ = ('state', 'keysym')


class MouseMotion(Event):
    """Mouse moved."""
    # the motion record also has a button bitmask, limited to 8 buttons; use MouseButton
    __slots__ = ('x', 'y', 'xrel', 'yrel')


class MouseButton(Event):
    """Mouse button pressed or released."""
    __slots__ = ('button', 'state', 'x', 'y')

    @property
    def pressed(self):
        """Button is down."""
        return self.state == BUTTON_DOWN

    @property
    def button_name(self):
        """Name of the button, or None for unnamed buttons."""
        return BUTTON_NAMES.get(self.button)


class JoyAxis(Event):
    """Joystick axis moved."""
    __slots__ = ('device', 'axis', 'value')


class JoyButton(Event):
    """Joystick button pressed or released."""
    __slots__ = ('device', 'button', 'state')

    @property
    def pressed(self):
        """Button is down."""
        return self.state == BUTTON_DOWN


class JoyHat(Event):
    """Joystick hat position changed."""
    __slots__ = ('device', 'hat', 'value')


class JoyBall(Event):
    """Joystick trackball moved."""
    __slots__ = ('device', 'ball', 'xrel', 'yrel')


class Resize(Event):
    """Window resized by the user."""
    __slots__ = ('w', 'h')


class Expose(Event):
    """Screen needs redrawing."""
    __slots__ = ()


class Quit(Event):
    """Quit requested."""
    __slots__ = ()


class User(Event):
    """Application-defined event."""
    __slots__ = ('payload',)


class Unknown(Event):
    """Event of a type we do not decode."""
    __slots__ = ('type',)


###############################################################################
# decoders for single record types

def decode_active(raw):
    """Decode an SDL_ActiveEvent."""
    return Active(ACTIVE_STATES.get((raw.state, raw.gain), UNKNOWN))

def decode_keysym(raw):
    """Decode an SDL_keysym."""
    return Keysym(raw.scancode, raw.sym, raw.mod, raw.unicode)

def decode_keyboard(raw):
    """Decode an SDL_KeyboardEvent."""
    state = KEY_STATES.get(raw.state, UNKNOWN)
    if state == UNKNOWN:
        return Keyboard(UNKNOWN, None)
    return Keyboard(state, decode_keysym(raw.keysym))

def decode_mouse_motion(raw):
    """Decode an SDL_MouseMotionEvent."""
    return MouseMotion(raw.x, raw.y, raw.xrel, raw.yrel)

def decode_mouse_button(raw):
    """Decode an SDL_MouseButtonEvent."""
    return MouseButton(raw.button, BUTTON_STATES.get(raw.state, UNKNOWN), raw.x, raw.y)

def decode_joy_axis(raw):
    """Decode an SDL_JoyAxisEvent."""
    return JoyAxis(raw.which, raw.axis, raw.value)

def decode_joy_button(raw):
    """Decode an SDL_JoyButtonEvent."""
    return JoyButton(raw.which, raw.button, BUTTON_STATES.get(raw.state, UNKNOWN))

def decode_joy_hat(raw):
    """Decode an SDL_JoyHatEvent."""
    return JoyHat(raw.which, raw.hat, raw.value)

def decode_joy_ball(raw):
    """Decode an SDL_JoyBallEvent."""
    return JoyBall(raw.which, raw.ball, raw.xrel, raw.yrel)

def decode_resize(raw):
    """Decode an SDL_ResizeEvent."""
    return Resize(raw.w, raw.h)

def decode_user(raw, user_decoder=None):
    """Decode an SDL_UserEvent, optionally with an application-supplied decoder."""
    if user_decoder is not None:
        return User(user_decoder(raw))
    return User(UserData(raw.type, raw.code, raw.data1, raw.data2))


# discriminant -> (union member, decoder)
_DECODERS = {
    sdl.SDL_ACTIVEEVENT: ('active', decode_active),
    sdl.SDL_KEYDOWN: ('key', decode_keyboard),
    sdl.SDL_KEYUP: ('key', decode_keyboard),
    sdl.SDL_MOUSEMOTION: ('motion', decode_mouse_motion),
    sdl.SDL_MOUSEBUTTONDOWN: ('button', decode_mouse_button),
    sdl.SDL_MOUSEBUTTONUP: ('button', decode_mouse_button),
    sdl.SDL_JOYAXISMOTION: ('jaxis', decode_joy_axis),
    sdl.SDL_JOYBALLMOTION: ('jball', decode_joy_ball),
    sdl.SDL_JOYHATMOTION: ('jhat', decode_joy_hat),
    sdl.SDL_JOYBUTTONDOWN: ('jbutton', decode_joy_button),
    sdl.SDL_JOYBUTTONUP: ('jbutton', decode_joy_button),
    sdl.SDL_VIDEORESIZE: ('resize', decode_resize),
    sdl.SDL_VIDEOEXPOSE: ('expose', lambda _raw: Expose()),
    sdl.SDL_QUIT: ('quit', lambda _raw: Quit()),
}


def decode_event(raw, user_decoder=None):
    """
    Decode one SDL_Event union into an event value.
    This is total: any discriminant we do not know, including NOEVENT, SYSWMEVENT
    and the reserved slots, decodes to Unknown rather than raising.
    """
    event_type = raw.type
    if sdl.SDL_USEREVENT <= event_type < sdl.SDL_NUMEVENTS:
        return decode_user(raw.user, user_decoder)
    try:
        member, decoder = _DECODERS[event_type]
    except KeyError:
        return Unknown(event_type)
    return decoder(getattr(raw, member))
