"""Data models behind the game's UI screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MenuModel:
    """A list of menu options with a wrapping selection cursor."""

    menu_options: list[str] = field(default_factory=list)
    selected_item: int = 0

    def __post_init__(self) -> None:
        if not self.menu_options:
            raise ValueError("a menu needs at least one option")
        if not 0 <= self.selected_item < len(self.menu_options):
            raise ValueError(f"selected item {self.selected_item} out of range")

    def select_next_item(self) -> None:
        """Move the selection down, wrapping to the first item."""
        self.selected_item = (self.selected_item + 1) % len(self.menu_options)

    def select_previous_item(self) -> None:
        """Move the selection up, wrapping to the last item."""
        self.selected_item = (self.selected_item - 1) % len(self.menu_options)

    @property
    def selected_option(self) -> str:
        """The currently selected menu option."""
        return self.menu_options[self.selected_item]


@dataclass
class TitleModel(MenuModel):
    """Title screen: background plus the main menu."""

    background: Any = None
    menu_options: list[str] = field(
        default_factory=lambda: ["Start Game", "Instructions", "Exit"]
    )


@dataclass
class GameModel:
    """Shared game state shown by the in-game HUD."""

    background: Any = None
    player_sprite: Any = None
    enemy_sprite: Any = None
    bullet_sprite: Any = None
    power_up_sprites: tuple[Any, Any, Any] = (None, None, None)
    score: int = 0
    health: int = 0
    level: int = 0
    scientists_rescued: int = 0
    total_scientists: int = 0
    start_time: int = 0
    elapsed_time: int = 0


@dataclass
class PauseModel(MenuModel):
    """Pause screen: the paused game plus the pause menu."""

    game_model: GameModel | None = None
    menu_options: list[str] = field(
        default_factory=lambda: ["Resume", "Restart", "Quit"]
    )


@dataclass
class FadeInModel:
    """Timer that drives a one-second fade-in."""

    timer: float = 0.0
    alpha: float = 0.0

    def update(self, dt: float) -> None:
        """Advance the timer by ``dt`` seconds and recompute the alpha."""
        self.timer += dt
        self.alpha = self.timer if self.timer < 1.0 else 1.0


@dataclass
class IntroModel(FadeInModel):
    """Intro story screen."""

    background: Any = None
    player_sprite: Any = None


@dataclass
class BossIntroModel(FadeInModel):
    """Boss warning screen."""

    background: Any = None
    player_sprite: Any = None
    boss_sprite: Any = None


@dataclass
class GameOverModel:
    """Snapshot of the final game statistics."""

    game_model: GameModel
    player_won: bool
    final_score: int
    levels_complete: int
    time_elapsed: int
    scientists: int
    total_scientists: int

    @classmethod
    def from_game_model(cls, game_model: GameModel, player_won: bool) -> GameOverModel:
        """Capture the current values of ``game_model``."""
        return cls(
            game_model=game_model,
            player_won=player_won,
            final_score=game_model.score,
            levels_complete=game_model.level,
            time_elapsed=game_model.elapsed_time,
            scientists=game_model.scientists_rescued,
            total_scientists=game_model.total_scientists,
        )