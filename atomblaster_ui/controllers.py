"""Input controllers that drive transitions between the UI screens."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Optional

from atomblaster_ui.models import (
    BossIntroModel,
    GameModel,
    GameOverModel,
    IntroModel,
    MenuModel,
    PauseModel,
    TitleModel,
)

_INTRO_SKIP_DELAY = 1.0
_INTRO_AUTO_ADVANCE = 10.0
_BOSS_INTRO_AUTO_ADVANCE = 8.0


class Key(enum.Enum):
    """Keys the UI controllers react to."""

    UP = enum.auto()
    DOWN = enum.auto()
    W = enum.auto()
    S = enum.auto()
    ENTER = enum.auto()
    SPACE = enum.auto()
    ESCAPE = enum.auto()
    R = enum.auto()
    Q = enum.auto()


class GameState(enum.Enum):
    """Top-level screens of the game."""

    INTRO = enum.auto()
    TITLE = enum.auto()
    GAME = enum.auto()
    PAUSE = enum.auto()
    GAME_OVER = enum.auto()
    BOSS_INTRO = enum.auto()


_PREVIOUS_KEYS = frozenset({Key.UP, Key.W})
_NEXT_KEYS = frozenset({Key.DOWN, Key.S})
_CONFIRM_KEYS = frozenset({Key.ENTER, Key.SPACE})

Callback = Optional[Callable[[], None]]


def _call(callback: Callback) -> None:
    if callback is not None:
        callback()


def _navigate(model: MenuModel, pressed: frozenset[Key]) -> None:
    if pressed & _PREVIOUS_KEYS:
        model.select_previous_item()
    if pressed & _NEXT_KEYS:
        model.select_next_item()


@dataclass
class TitleController:
    """Menu navigation and selection on the title screen."""

    model: TitleModel
    state: GameState = GameState.TITLE
    on_quit: Callback = None

    def handle_input(self, pressed: Iterable[Key]) -> bool:
        """Process the keys pressed this frame; True if the screen should change."""
        keys = frozenset(pressed)
        _navigate(self.model, keys)
        if keys & _CONFIRM_KEYS:
            option = self.model.selected_option
            if option == "Start Game":
                self.state = GameState.GAME
                return True
            if option == "Instructions":
                self.state = GameState.INTRO
                return True
            if option == "Exit":
                _call(self.on_quit)
                return True
        return False


@dataclass
class IntroController:
    """Advances the intro story and moves on to the title screen."""

    model: IntroModel
    state: GameState = GameState.INTRO

    def handle_input(self, pressed: Iterable[Key], dt: float) -> bool:
        """Advance the animation by ``dt``; True once the intro is over."""
        keys = frozenset(pressed)
        self.model.update(dt)
        if self.model.timer > _INTRO_SKIP_DELAY and keys & _CONFIRM_KEYS:
            self.state = GameState.TITLE
            return True
        if self.model.timer > _INTRO_AUTO_ADVANCE:
            self.state = GameState.TITLE
            return True
        return False


@dataclass
class GameController:
    """The game screen itself triggers no transitions.

    It records the keys of the latest frame so the in-game input handling
    can read them back.
    """

    model: GameModel
    last_pressed: frozenset = field(default_factory=frozenset)

    def handle_input(self, pressed: Iterable[Key]) -> bool:
        """Record this frame's keys; never requests a screen change."""
        self.last_pressed = frozenset(pressed)
        return False


@dataclass
class PauseController:
    """Menu on the pause screen; Escape resumes the game."""

    model: PauseModel
    reset_game: Callback = None
    state: GameState = GameState.PAUSE
    on_quit: Callback = None

    def handle_input(self, pressed: Iterable[Key]) -> bool:
        """Process the keys pressed this frame; True if the screen should change."""
        keys = frozenset(pressed)
        _navigate(self.model, keys)
        if keys & _CONFIRM_KEYS:
            option = self.model.selected_option
            if option == "Resume":
                self.state = GameState.GAME
                return True
            if option == "Restart":
                _call(self.reset_game)
                self.state = GameState.GAME
                return True
            if option == "Quit":
                _call(self.on_quit)
                return True
        if Key.ESCAPE in keys:
            self.state = GameState.GAME
            return True
        return False


@dataclass
class GameOverController:
    """R restarts the game, Q quits."""

    model: GameOverModel
    reset_game: Callback = None
    state: GameState = GameState.GAME_OVER
    on_quit: Callback = None

    def handle_input(self, pressed: Iterable[Key]) -> bool:
        """Process the keys pressed this frame; True if the screen should change."""
        keys = frozenset(pressed)
        if Key.R in keys:
            _call(self.reset_game)
            self.state = GameState.GAME
            return True
        if Key.Q in keys:
            _call(self.on_quit)
            return True
        return False


@dataclass
class BossIntroController:
    """Advances the boss warning and then returns to the game."""

    model: BossIntroModel
    state: GameState = GameState.BOSS_INTRO

    def handle_input(self, pressed: Iterable[Key], dt: float) -> bool:
        """Advance the animation by ``dt``; True once the warning is over."""
        keys = frozenset(pressed)
        self.model.update(dt)
        if self.model.timer > _INTRO_SKIP_DELAY and keys & _CONFIRM_KEYS:
            self.state = GameState.GAME
            return True
        if self.model.timer > _BOSS_INTRO_AUTO_ADVANCE:
            self.state = GameState.GAME
            return True
        return False