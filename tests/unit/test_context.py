"""
safesdl tests.test_context
unit tests for the library context and subsystem guards

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import gc
import copy

import safesdl
from safesdl.native import types as sdl
from safesdl.error import OtherError, ErrorCode, ENOMEM
from safesdl.error import NotInitialised, AlreadyInitialised, SubsystemInUse
from safesdl.events import Quit, Resize
from tests.unit.fakesdl import make_event
from tests.unit.utils import TestCase, run_tests


class ContextTest(TestCase):
    """Unit tests for the library context."""

    def test_init(self):
        """Initialisation calls the library once with no subsystems."""
        context = self.init()
        assert context.active
        assert self.lib.calls == [('SDL_Init', 0)]
        assert safesdl.current() is context

    def test_init_twice(self):
        """A second live context is refused without touching the library."""
        context = self.init()
        with self.assertRaises(AlreadyInitialised):
            self.init()
        assert self.lib.count('SDL_Init') == 1
        context.quit()
        # after quitting, a new context is fine
        self.init()
        assert self.lib.count('SDL_Init') == 2

    def test_direct_construction(self):
        """Building the context class directly obeys the same one-context rule."""
        context = self.init()
        with self.assertRaises(AlreadyInitialised):
            safesdl.SDL(self.lib)
        assert self.lib.count('SDL_Init') == 1
        assert safesdl.current() is context
        context.quit()
        second = safesdl.SDL(self.lib)
        assert safesdl.current() is second
        assert self.lib.names() == ['SDL_Init', 'SDL_Quit', 'SDL_Init']

    def test_init_failure(self):
        """A failed init raises the translated error and leaves no context."""
        self.lib.fail('SDL_Init', b'Out of memory')
        with self.assertRaises(ErrorCode) as cm:
            self.init()
        assert cm.exception.code == ENOMEM
        assert safesdl.current() is None
        assert self.lib.count('SDL_Quit') == 0

    def test_quit(self):
        """Quit calls the library once, however often it is called."""
        context = self.init()
        context.quit()
        context.quit()
        context.close()
        assert not context.active
        assert self.lib.count('SDL_Quit') == 1
        assert safesdl.current() is None

    def test_with(self):
        """Context manager quits on exit."""
        with self.init() as context:
            assert context.active
        assert not context.active
        assert self.lib.count('SDL_Quit') == 1

    def test_collect(self):
        """Dropping the context quits the library."""
        context = self.init()
        del context
        gc.collect()
        assert self.lib.count('SDL_Quit') == 1
        assert safesdl.current() is None

    def test_closed_lib(self):
        """A closed context refuses library access."""
        context = self.init()
        context.quit()
        with self.assertRaises(NotInitialised):
            context.lib
        with self.assertRaises(NotInitialised):
            context.poll_event()

    def test_no_copy(self):
        """Contexts cannot be copied."""
        context = self.init()
        with self.assertRaises(TypeError):
            copy.copy(context)
        with self.assertRaises(TypeError):
            copy.deepcopy(context)

    def test_driver(self):
        """The video driver variable is set for the lifetime of the context."""
        saved = os.environ.pop('SDL_VIDEODRIVER', None)
        try:
            context = self.init(driver='dummy')
            assert os.environ['SDL_VIDEODRIVER'] == 'dummy'
            context.quit()
            assert 'SDL_VIDEODRIVER' not in os.environ
        finally:
            if saved is not None:
                os.environ['SDL_VIDEODRIVER'] = saved

    def test_driver_restored_on_failure(self):
        """A failed init restores the environment."""
        os.environ['SDL_VIDEODRIVER'] = 'before'
        try:
            self.lib.fail('SDL_Init', b'No available video device')
            with self.assertRaises(OtherError):
                self.init(driver='dummy')
            assert os.environ['SDL_VIDEODRIVER'] == 'before'
        finally:
            del os.environ['SDL_VIDEODRIVER']

    def test_was_init(self):
        """was_init reflects the library's view."""
        context = self.init()
        assert not context.was_init(safesdl.VIDEO)
        video = context.video()
        assert context.was_init(safesdl.VIDEO)
        assert context.was_init() == sdl.SDL_INIT_VIDEO
        video.close()
        assert not context.was_init(safesdl.VIDEO)

    def test_was_init_unknown(self):
        """An unknown subsystem name is refused without a library call."""
        context = self.init()
        with self.assertRaises(ValueError):
            context.was_init('teleporter')
        assert self.lib.count('SDL_WasInit') == 0


class SubsystemTest(TestCase):
    """Unit tests for subsystem guards."""

    def test_guard(self):
        """A guard initialises its subsystem."""
        context = self.init()
        video = context.video()
        assert isinstance(video, safesdl.VideoSubsystem)
        assert video.active
        assert video.context is context
        assert context.guard(safesdl.VIDEO) is video
        assert self.lib.count('SDL_InitSubSystem', sdl.SDL_INIT_VIDEO) == 1

    def test_all_subsystems(self):
        """Every subsystem has its own guard class and mask."""
        context = self.init()
        guards = [
            (context.video(), sdl.SDL_INIT_VIDEO),
            (context.audio(), sdl.SDL_INIT_AUDIO),
            (context.timer(), sdl.SDL_INIT_TIMER),
            (context.joystick(), sdl.SDL_INIT_JOYSTICK),
            (context.cdrom(), sdl.SDL_INIT_CDROM),
            (context.event_thread(), sdl.SDL_INIT_EVENTTHREAD),
        ]
        for guard, mask in guards:
            assert guard.mask == mask
            assert self.lib.count('SDL_InitSubSystem', mask) == 1
        assert type(guards[1][0]) is safesdl.AudioSubsystem
        assert type(guards[5][0]) is safesdl.EventThreadSubsystem

    def test_by_name(self):
        """Guards can be requested by name."""
        context = self.init()
        timer = context.subsystem(safesdl.TIMER)
        assert isinstance(timer, safesdl.TimerSubsystem)
        with self.assertRaises(ValueError):
            context.subsystem('teleporter')

    def test_close_once(self):
        """Closing a guard quits the subsystem exactly once."""
        context = self.init()
        audio = context.audio()
        audio.close()
        audio.close()
        assert not audio.active
        assert self.lib.count('SDL_QuitSubSystem', sdl.SDL_INIT_AUDIO) == 1
        assert context.guard(safesdl.AUDIO) is None

    def test_collect_once(self):
        """Dropping a guard quits the subsystem exactly once."""
        context = self.init()
        context.joystick()
        gc.collect()
        assert self.lib.count('SDL_QuitSubSystem', sdl.SDL_INIT_JOYSTICK) == 1
        context.quit()
        assert self.lib.count('SDL_QuitSubSystem', sdl.SDL_INIT_JOYSTICK) == 1

    def test_with(self):
        """Context manager closes the guard."""
        context = self.init()
        with context.timer() as timer:
            assert timer.active
        assert not timer.active
        assert self.lib.count('SDL_QuitSubSystem', sdl.SDL_INIT_TIMER) == 1

    def test_needs_live_context(self):
        """No guard can be built on a closed context, or on something else."""
        context = self.init()
        context.quit()
        calls = len(self.lib.calls)
        with self.assertRaises(NotInitialised):
            context.video()
        with self.assertRaises(NotInitialised):
            safesdl.VideoSubsystem(context)
        with self.assertRaises(NotInitialised):
            safesdl.TimerSubsystem(None)
        assert len(self.lib.calls) == calls

    def test_duplicate(self):
        """A second guard for a live subsystem is refused without a library call."""
        context = self.init()
        video = context.video()
        with self.assertRaises(SubsystemInUse):
            context.video()
        assert self.lib.count('SDL_InitSubSystem') == 1
        # the first guard is unaffected
        assert video.active
        video.close()
        # once closed, a new guard is fine
        context.video()
        assert self.lib.count('SDL_InitSubSystem') == 2

    def test_init_failure(self):
        """A failed subsystem init raises the library error and leaves no guard."""
        context = self.init()
        self.lib.fail('SDL_InitSubSystem', b'No available audio device')
        with self.assertRaises(OtherError) as cm:
            context.audio()
        assert cm.exception.text == u'No available audio device'
        assert context.guard(safesdl.AUDIO) is None
        assert self.lib.count('SDL_QuitSubSystem') == 0
        # retry is possible
        context.audio()

    def test_quit_order(self):
        """Quitting the context closes guards newest first, then quits the library."""
        context = self.init()
        timer = context.timer()
        video = context.video()
        audio = context.audio()
        context.quit()
        quits = [_call for _call in self.lib.calls if _call[0] in ('SDL_QuitSubSystem', 'SDL_Quit')]
        assert quits == [
            ('SDL_QuitSubSystem', sdl.SDL_INIT_AUDIO),
            ('SDL_QuitSubSystem', sdl.SDL_INIT_VIDEO),
            ('SDL_QuitSubSystem', sdl.SDL_INIT_TIMER),
            ('SDL_Quit',),
        ], quits
        assert not (timer.active or video.active or audio.active)
        # closing the guards afterwards does nothing
        video.close()
        assert self.lib.count('SDL_QuitSubSystem') == 3

    def test_guard_keeps_context(self):
        """A live guard keeps its context alive; the global quit comes last."""
        video = self.init().video()
        gc.collect()
        assert self.lib.count('SDL_Quit') == 0
        assert video.context.active
        del video
        gc.collect()
        assert self.lib.names()[-2:] == ['SDL_QuitSubSystem', 'SDL_Quit'], self.lib.names()

    def test_closed_guard(self):
        """A closed guard refuses library access."""
        context = self.init()
        timer = context.timer()
        timer.close()
        with self.assertRaises(NotInitialised):
            timer.ticks()

    def test_no_copy(self):
        """Guards cannot be copied."""
        context = self.init()
        audio = context.audio()
        with self.assertRaises(TypeError):
            copy.copy(audio)
        with self.assertRaises(TypeError):
            copy.deepcopy(audio)

    def test_timer(self):
        """Timer delay and ticks pass through."""
        context = self.init()
        timer = context.timer()
        self.lib.ticks = 100
        timer.delay(25)
        assert timer.ticks() == 125
        assert self.lib.count('SDL_Delay', 25) == 1

    def test_joystick(self):
        """Joystick count passes through."""
        self.lib.joysticks = 2
        context = self.init()
        assert context.joystick().count() == 2

    def test_cdrom(self):
        """Cd-rom count passes through; a failure raises."""
        self.lib.cdroms = 1
        context = self.init()
        cdrom = context.cdrom()
        assert cdrom.count() == 1
        self.lib.fail('SDL_CDNumDrives', b'CD-ROM not supported')
        with self.assertRaises(OtherError):
            cdrom.count()


class EventQueueTest(TestCase):
    """Unit tests for reading the event queue."""

    def test_poll_empty(self):
        """Polling an empty queue gives None."""
        context = self.init()
        assert context.poll_event() is None

    def test_poll(self):
        """Polled events come out decoded, in order."""
        context = self.init()
        self.lib.push(
            make_event(sdl.SDL_VIDEORESIZE, 'resize', w=800, h=600),
            make_event(sdl.SDL_QUIT),
        )
        assert context.poll_event() == Resize(800, 600)
        assert context.poll_event() == Quit()
        assert context.poll_event() is None

    def test_events(self):
        """events() drains the queue."""
        context = self.init()
        self.lib.push(make_event(sdl.SDL_QUIT), make_event(sdl.SDL_VIDEOEXPOSE))
        events = list(context.events())
        assert len(events) == 2
        assert events[0] == Quit()
        assert list(context.events()) == []

    def test_user_decoder(self):
        """A user decoder receives the raw user record."""
        context = self.init()
        self.lib.push(make_event(sdl.SDL_USEREVENT + 1, 'user', code=42))
        event = context.poll_event(user_decoder=lambda _raw: _raw.code)
        assert event.payload == 42

    def test_wait(self):
        """wait_event returns the next event, or raises the library error."""
        context = self.init()
        self.lib.push(make_event(sdl.SDL_QUIT))
        assert context.wait_event() == Quit()
        with self.assertRaises(OtherError) as cm:
            context.wait_event()
        assert cm.exception.text == u'No events queued'


if __name__ == '__main__':
    run_tests()
