"""The top-level program: routes events between the menus and the running game."""

from __future__ import annotations

import argparse
import random
import time
from enum import Enum, auto
from typing import Dict, Hashable, List, Optional, Sequence

from .clock import Clock
from .controls import Controls
from .events import EventQueue, EventType
from .game_manager import GameManager, Preset

MAIN_MENU = "main"
PAUSE_MENU = "pause"
GAME_END_MENU = "game_end"


class ProgramState(Enum):
    """What the program is currently doing."""

    NOT_RUNNING = auto()
    MAIN_MENU = auto()
    GAMEPLAY = auto()
    PAUSED = auto()


class Program:
    """Owns the clock, the event queue, the menu stack and the game manager."""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        controls: Sequence[Controls] = (),
    ) -> None:
        self._clock = clock if clock is not None else Clock()
        self._rng = rng if rng is not None else random.Random()
        self._controls = tuple(controls)
        self._events = EventQueue()
        self._menus: List[Hashable] = [MAIN_MENU]
        self._settings: Dict[int, int] = {}
        self._manager = self._new_manager(Preset.TITLE)
        self._state = ProgramState.MAIN_MENU

    def __enter__(self) -> Program:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def state(self) -> ProgramState:
        """The current program state."""
        return self._state

    @property
    def events(self) -> EventQueue:
        return self._events

    @property
    def game_manager(self) -> GameManager:
        return self._manager

    @property
    def menu_stack(self) -> tuple:
        """Open menus, the topmost last."""
        return tuple(self._menus)

    @property
    def settings(self) -> Dict[int, int]:
        """Settings changed through events, by setting id."""
        return dict(self._settings)

    def _new_manager(self, preset: Preset) -> GameManager:
        return GameManager(preset, self._events, self._rng, self._controls)

    def process_events(self) -> None:
        """Handle every queued event, including those queued while handling."""
        if self._state is ProgramState.NOT_RUNNING:
            return

        for event in self._events.drain():
            kind = event.type
            if kind is EventType.PROGRAM_CLOSE:
                self._state = ProgramState.NOT_RUNNING
                return
            if kind is EventType.GAME_NEW:
                self._manager = self._new_manager(Preset(event.data))
                self._menus.clear()
                self._state = ProgramState.GAMEPLAY
            elif kind is EventType.PAUSE:
                if self._state is not ProgramState.GAMEPLAY:
                    raise RuntimeError("only a running game can be paused")
                self._menus.append(PAUSE_MENU)
                self._state = ProgramState.PAUSED
            elif kind is EventType.RESUME:
                if self._state is not ProgramState.PAUSED:
                    raise RuntimeError("only a paused game can be resumed")
                self._return_menu()
                self._state = ProgramState.GAMEPLAY
            elif kind is EventType.RELOAD_MENU:
                self._menus[:] = [event.data]
            elif kind is EventType.PUSH_MENU:
                self._menus.append(event.data)
            elif kind is EventType.MENU_RETURN:
                self._return_menu()
            elif kind is EventType.GAME_EXIT:
                self._manager = self._new_manager(Preset.TITLE)
                self._menus[:] = [MAIN_MENU]
                self._state = ProgramState.MAIN_MENU
            elif kind is EventType.GAME_DONE:
                self._menus[:] = [GAME_END_MENU]
                self._state = ProgramState.MAIN_MENU
            elif kind is EventType.GAME_RESET:
                self._manager = self._new_manager(self._manager.preset)
                self._menus.clear()
                self._state = ProgramState.GAMEPLAY
            elif kind is EventType.UPDATE_SETTINGS:
                self._settings[event.data.setting] = event.data.value
            elif kind is EventType.UPDATE_WINDOW:
                continue
            else:
                self._manager.process_event(event)

    def _return_menu(self) -> None:
        if self._menus:
            self._menus.pop()

    def update(self) -> None:
        """Advance the clock and, unless paused, the game."""
        if self._state is ProgramState.NOT_RUNNING:
            return
        self._clock.update()
        if self._state is not ProgramState.PAUSED:
            self._manager.update(self._clock.delta(), self._clock.elapsed())

    def close(self) -> None:
        """Stop the program."""
        self._state = ProgramState.NOT_RUNNING


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the title game headlessly for a number of frames."""
    parser = argparse.ArgumentParser(prog="gravdash", description="Gravity Dash")
    parser.add_argument("--frames", type=int, default=600, help="frames to run")
    parser.add_argument("--fps", type=int, default=60, help="target frame rate")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames cannot be negative")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    frame_time = 1.0 / args.fps
    with Program(rng=random.Random(args.seed)) as program:
        frames = 0
        while program.state is not ProgramState.NOT_RUNNING and frames < args.frames:
            program.process_events()
            program.update()
            frames += 1
            time.sleep(frame_time)
        objects = len(program.game_manager.game.objects)
    print(f"Ran {frames} frames; {objects} objects in play.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())