# atomblaster-ui

This package holds the screen logic for a helicopter rescue arcade game. It
does not depend on any rendering library. It contains these modules:

- `atomblaster_ui.util`: small vector and number helpers.
  - `Vector2` is a frozen dataclass with `+`, `-`, scalar `*` and `length`.
  - The functions are `distance`, `normalize_vector`, `clamp_value`, `lerp`,
    `random_range`, `random_velocity` and `pulse_value`.
  - The random helpers take an optional `random.Random` instance.
- `atomblaster_ui.models`: the data behind each screen.
  - `MenuModel` is a list of options with a selection that wraps around. You
    move it with `select_next_item()` and `select_previous_item()`, and
    `selected_option` is a property.
  - `TitleModel` and `PauseModel` are menu models.
  - `IntroModel` and `BossIntroModel` are built on `FadeInModel`, whose
    `update(dt)` runs a one-second fade-in.
  - `GameModel` holds the in-game statistics. `GameOverModel.from_game_model`
    takes a snapshot of them.
- `atomblaster_ui.floating_messages`: short-lived pop-up texts.
  - A `FloatingMessageSystem` keeps its own clock and moves it forward in
    `update(dt)`.
  - Each message drifts upward and fades out over its last half second.
  - Renderers read `visible_messages()` together with each message's
    `font_size()`, `text_alpha()` and `shadow_alpha()`.
- `atomblaster_ui.controllers`: input handling for each screen.
  - Each controller's `handle_input` takes the set of `Key`s pressed this
    frame. The intro controllers also take `dt`.
  - `handle_input` returns `True` when the screen should change. The next
    `GameState` is then stored in `state`.
  - Restart and quit actions call the optional `reset_game` and `on_quit`
    callbacks.
- `atomblaster_ui.game_over`: the end-of-game summary.
  - `rescue_rate`, `performance_message` and `format_clock` are plain
    functions.
  - `GameOverSummary.lines()` gives the text lines of the screen from top to
    bottom.
- `atomblaster_ui.boss_intro`: `BossIntroAnimation`, the timed cut-scene
  before the boss fight.
  - During the scene the enemy helicopter circles and kills the scientists,
    and then the player's helicopter enters.
  - Step it with `update(dt)`.
  - Read its state from `progress()`, `caption()`, `prompt_alpha()`,
    `boss_pos`, `player_pos`, `scientists` and `explosions`.
  - Call `handle_input(pressed)` to find out when the battle should begin.

## What it does not do

The package draws nothing and opens no window. It also does not read the
keyboard itself. You supply the pressed keys and the frame time, then draw
whatever the state describes. It has no game loop and no player, enemies,
bullets or level logic, and no command to run.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from atomblaster_ui.controllers import GameState, Key, TitleController
from atomblaster_ui.models import TitleModel

menu = TitleModel()
controller = TitleController(menu)

controller.handle_input({Key.DOWN})
print(menu.selected_option)          # Instructions

if controller.handle_input({Key.ENTER}):
    print(controller.state is GameState.INTRO)   # True
```

```python
from atomblaster_ui.boss_intro import BossIntroAnimation
from atomblaster_ui.controllers import Key

scene = BossIntroAnimation()
for _ in range(600):
    scene.update(1 / 60)
print(scene.caption().text)          # DEFEAT THE ENEMY HELICOPTER!
print(scene.handle_input({Key.ENTER}))  # True
```