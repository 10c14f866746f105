"""
safesdl - main.py
Demonstration entry point: open a window and run its event loop

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import sys
import logging
from contextlib import contextmanager

from . import config
from .context import init
from .events import Quit, Expose, Resize
from .error import SDLError, LifecycleError, WindowBuildError
from .native import load_library


# event loop idle time between polls, in ms
IDLE_DELAY = 10


def main(*arguments):
    """Initialise, parse arguments and run the demo; return the exit status."""
    settings = config.Settings(arguments if arguments else None)
    try:
        lib = load_library(*settings.dll_paths)
        run(lib, settings)
    except ImportError as e:
        logging.error(e)
        return 1
    except (SDLError, LifecycleError, WindowBuildError) as e:
        logging.error('%s: %s', type(e).__name__, e)
        return 1
    return 0


def run(lib, settings):
    """Open the window described by the settings and process events until done."""
    params = settings.window_params
    with init(lib, driver=settings.driver) as context:
        with context.video() as video, context.timer() as timer:
            builder = video.window(params['title'], params['width'], params['height'])
            if params['fullscreen']:
                builder.fullscreen()
            if params['resizable']:
                builder.resizable()
            if params['borderless']:
                builder.borderless()
            with builder.build() as screen:
                logging.info('Opened %r', screen)
                screen.flip()
                _event_loop(context, timer, screen, settings.wait)


def _event_loop(context, timer, screen, wait):
    """Handle events until quit, or until `wait` ms have passed if nonzero."""
    start = timer.ticks()
    while True:
        for event in context.events():
            logging.debug('Event: %r', event)
            if isinstance(event, Quit):
                return
            elif isinstance(event, (Expose, Resize)):
                screen.flip()
        if wait and timer.ticks() - start >= wait:
            return
        timer.delay(IDLE_DELAY)


@contextmanager
def script_entry_point_guard():
    """Wrapper for entry points, to deal with Ctrl-C and sigpipe."""
    try:
        yield
    except KeyboardInterrupt:
        pass
    except BrokenPipeError:
        # see docs.python.org/3/library/signal.html#note-on-sigpipe
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
