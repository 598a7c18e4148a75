# gravdash

The game logic of *Gravity Dash*, an arcade game in which characters run
along the floor or ceiling of a small world and flip gravity to jump
between the two. While in the air they hit moving targets to build
combos, collect time bonuses and avoid saws.

The package is a simulation only. Every part is advanced by explicit time
steps in milliseconds, so a game can be run, scripted and tested without a
window.

## Installation

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Running

```
gravdash [--frames N] [--fps N] [--seed N]
```

This runs the title game (four computer-controlled characters with
targets spawning) headlessly. It steps the program once per frame and
sleeps between frames to keep the target frame rate. At the end it prints
how many frames ran and how many objects were in play.

- `--frames`: frames to run (default 600, must not be negative)
- `--fps`: target frame rate (default 60, must be positive)
- `--seed`: seed for the random number generator

## Using the library

- `gravdash.program`
  - `Program` is the top-level state machine with `ProgramState` values `NOT_RUNNING`, `MAIN_MENU`, `GAMEPLAY` and `PAUSED`.
  - `process_events()` handles the queued program events: starting, resetting, pausing, resuming and leaving a game, menu pushes and returns, and setting changes. It hands every other event to the game manager.
  - `update()` advances the clock and, unless the program is paused, the game.
  - `Program` is also a context manager; `close()` stops it.
- `gravdash.game_manager`
  - `GameManager` builds a game from a `Preset`: `TITLE`, `MINUTE`, `RUSH`, `COOP` or `VS`. `NULL` raises `ValueError`.
  - It adds the preset's components and passes updates and events to the game and then to each component.
- `gravdash.game.Game` holds the world, the characters and the objects in play. It resolves collisions, keeps combo counts and announces `GAME_DONE` once every character has finished.
- `gravdash.components` provides the components a preset can add:
  - `ObjectSpawnComponent`
  - `BoostComponent`, made of `BoostMeter`s
  - `ScoreComponent`
  - `TimerComponent`
- `gravdash.character` defines `Character`, `PlayableCharacter` (driven by `Controls`) and `ComputerCharacter` (driven by a random generator), with `CharacterState`.
- `gravdash.game_object` defines `GameObject` and its kinds `Saw`, `MovingTarget` and `TimeBonus`.
- `gravdash.world` defines `World`, the playable region, and its border `AttachPoint`s.
- `gravdash.entity.Entity` holds a position, scale and rotation, together with an animation queue and Bezier transitions.
- `gravdash.events` defines `EventQueue`, which carries `Event` values of an `EventType`. Their payloads are `ComboData`, `CollisionData` and `SettingsData`.
- `gravdash.controls` maps `Action`s to key bindings with `KeyboardControls`. It reads key states from any object that has `is_key_held`, `is_key_on_initial_click` and `is_key_clicked`.
- `gravdash.bezier` provides `Bezier` curves and `BezierTransition`, which moves a value smoothly over time.
- `gravdash.clock.Clock` measures frame deltas from a time source, which can be replaced.
- `gravdash.attachment.Attachment` is a reference point that tells an attached callback when it moves.
- `gravdash.numbers.Number` stores a non-negative number as decimal digits. Subtracting below zero leaves it at zero.
- `gravdash.geometry` provides `Vec2`, `LineSegment`, `squared_distance_to_segment` and `sign`.

### Example

```python
import random

from gravdash.events import EventQueue
from gravdash.game_manager import GameManager, Preset

events = EventQueue()
manager = GameManager(Preset.TITLE, events, random.Random(1))

elapsed = 0
for _ in range(600):
    elapsed += 16
    manager.update(16, elapsed)
    for event in events.drain():
        manager.process_event(event)
```

The `TITLE` preset has only computer-controlled characters, so it needs no
controls. Presets with human players need one `Controls` object per human,
passed as `controls`.

## What the package does not do

- It draws nothing, plays no sound and opens no window. There are no particles and no menu screens. Menus exist only as names on `Program.menu_stack`.
- It reads no keyboard or other device. Input for human players has to come from a key-state object supplied to `KeyboardControls`, or from your own `Controls` subclass.
- It saves nothing to disk. Setting changes are kept in `Program.settings` for the life of the program, and there are no stored high scores or statistics.