"""
safesdl - ownership-safe layer over the SDL 1.2 multimedia library

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .context import init, current, SDL, Subsystem
from .context import VideoSubsystem, AudioSubsystem, TimerSubsystem
from .context import JoystickSubsystem, CDROMSubsystem, EventThreadSubsystem
from .context import VIDEO, AUDIO, TIMER, JOYSTICK, CDROM, EVENTTHREAD
from .error import SDLError, ErrorCode, OtherError, get_error, clear_error
from .error import LifecycleError, NotInitialised, AlreadyInitialised, SubsystemInUse
from .error import WindowBuildError, InvalidTitle, WidthOverflows, HeightOverflows, SdlError
from .events import decode_event
from .video import Color, Surface, WindowBuilder
from .main import main, script_entry_point_guard

__version__ = VERSION
