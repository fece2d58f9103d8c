"""Cut-scene in which the enemy helicopter attacks the scientists."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

from atomblaster_ui.controllers import Key
from atomblaster_ui.util import Vector2

SCIENTIST_COUNT = 8
SCIENTIST_RADIUS = 80.0
DEATH_SECONDS = 0.5
EXPLOSION_SECONDS = 0.5
EXPLOSION_MAX_SIZE = 30.0
OFFSCREEN = -50.0

INTRO_TEXT = "ENEMY HELICOPTER DETECTED"
MIDDLE_TEXT = "THE SCIENTISTS ARE BEING KILLED!"
FINAL_TEXT = "DEFEAT THE ENEMY HELICOPTER!"
PROMPT_TEXT = "PRESS ENTER TO BEGIN BATTLE"


@dataclass
class ScientistState:
    """Animation state of one scientist in the cut-scene."""

    pos: Vector2
    dead: bool = False
    death_timer: float = 0.0
    anim_timer: float = 0.0

    @property
    def dying(self) -> bool:
        """True once the death animation has started."""
        return self.death_timer > 0

    @property
    def death_progress(self) -> float:
        """Fraction of the death animation that has played."""
        return self.death_timer / DEATH_SECONDS


@dataclass
class Explosion:
    """A growing explosion flash."""

    pos: Vector2
    size: float = 0.0
    lifetime: float = EXPLOSION_SECONDS
    max_size: float = EXPLOSION_MAX_SIZE


class Caption(NamedTuple):
    """Headline text and its opacity."""

    text: str
    alpha: float


@dataclass
class BossIntroAnimation:
    """State of the boss intro cut-scene, advanced frame by frame."""

    screen_width: int = 800
    screen_height: int = 600
    duration: float = 8.0
    scientists: list[ScientistState] = field(default_factory=list)
    boss_pos: Vector2 = field(default_factory=Vector2)
    player_pos: Vector2 = field(default_factory=Vector2)
    anim_timer: float = 0.0
    prompt_timer: float = 0.0
    show_prompt: bool = False
    explosions: list[Explosion] = field(default_factory=list)
    text_alpha: float = 0.0

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        center_x = float(self.screen_width // 2)
        center_y = float(self.screen_height // 2)
        if not self.scientists:
            step = 2 * math.pi / SCIENTIST_COUNT
            self.scientists = [
                ScientistState(
                    pos=Vector2(
                        center_x + math.cos(i * step) * SCIENTIST_RADIUS,
                        center_y + math.sin(i * step) * SCIENTIST_RADIUS,
                    ),
                    anim_timer=i * 0.2,
                )
                for i in range(SCIENTIST_COUNT)
            ]
        if self.boss_pos == Vector2():
            self.boss_pos = Vector2(center_x, OFFSCREEN)
        if self.player_pos == Vector2():
            self.player_pos = Vector2(OFFSCREEN, center_y + 150)

    def progress(self) -> float:
        """Fraction of the animation that has elapsed (may exceed 1)."""
        return self.anim_timer / self.duration

    def update(self, dt: float) -> None:
        """Advance the cut-scene by ``dt`` seconds."""
        self.anim_timer += dt
        self.prompt_timer += dt
        p = self.progress()
        half_w = self.screen_width // 2
        half_h = self.screen_height // 2

        if p < 0.3:
            self.boss_pos = Vector2(self.boss_pos.x, OFFSCREEN + (p / 0.3) * 250)
        elif p < 0.7:
            circle_time = (p - 0.3) / 0.4
            angle = circle_time * 2 * math.pi
            self.boss_pos = Vector2(
                float(half_w + int(120 * math.cos(angle))),
                float(half_h + int(80 * math.sin(angle))),
            )
            killed = min(int(circle_time * SCIENTIST_COUNT), len(self.scientists))
            for sci in self.scientists[:killed]:
                if not sci.dead and sci.death_timer == 0:
                    sci.death_timer = 0.01
                    self.explosions.append(Explosion(pos=sci.pos))
        else:
            self.boss_pos = Vector2(float(half_w) + (p - 0.7) / 0.3 * 300, 200.0)

        if p > 0.8:
            entry = (p - 0.8) / 0.2
            self.player_pos = Vector2(
                OFFSCREEN + entry * float(half_w - 100), float(half_h + 150)
            )

        alive = []
        for exp in self.explosions:
            exp.lifetime -= dt
            if exp.lifetime > 0:
                exp.size = exp.max_size * (1 - exp.lifetime / EXPLOSION_SECONDS)
                alive.append(exp)
        self.explosions = alive

        for sci in self.scientists:
            sci.anim_timer += dt
            if sci.death_timer > 0:
                sci.death_timer += dt
                if sci.death_timer >= DEATH_SECONDS:
                    sci.dead = True

        if p < 0.3:
            self.text_alpha = min(1.0, self.text_alpha + dt * 2.0)
        elif p > 0.9:
            self.show_prompt = True

    def caption(self) -> Caption | None:
        """The headline shown at the current point, or None between headlines."""
        p = self.progress()
        if p < 0.3:
            return Caption(INTRO_TEXT, self.text_alpha)
        if 0.4 < p < 0.7:
            if p < 0.5:
                alpha = (p - 0.4) / 0.1
            elif p < 0.6:
                alpha = 1.0
            else:
                alpha = 1.0 - (p - 0.6) / 0.1
            return Caption(MIDDLE_TEXT, alpha)
        if p > 0.8:
            return Caption(FINAL_TEXT, 0.5 + 0.5 * math.sin(self.anim_timer * 8))
        return None

    def prompt_alpha(self) -> float:
        """Pulsing opacity of the start prompt."""
        return 0.5 + 0.5 * math.sin(self.prompt_timer * 4)

    def handle_input(self, pressed: Iterable[Key]) -> bool:
        """True when the battle should begin."""
        keys = frozenset(pressed)
        if self.anim_timer >= self.duration:
            self.show_prompt = True
        if self.show_prompt and Key.ENTER in keys:
            return True
        return Key.ESCAPE in keys