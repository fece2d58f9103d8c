"""Short-lived text messages that drift upwards and fade out."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from atomblaster_ui.util import Vector2

_BASE_FONT_SIZE = 24
_FADE_OUT_SECONDS = 0.5


@dataclass
class FloatingMessage:
    """One floating message and its animation state."""

    text: str
    pos: Vector2
    start_time: float
    duration: float
    alpha: float = 1.0
    scale: float = 1.0
    velocity: Vector2 = field(default_factory=lambda: Vector2(0.0, -30.0))

    def font_size(self) -> int:
        """Font size after scaling."""
        return int(_BASE_FONT_SIZE * self.scale)

    def text_alpha(self) -> int:
        """Alpha channel (0-255) of the main text."""
        return int(255 * self.alpha)

    def shadow_alpha(self) -> int:
        """Alpha channel (0-255) of the drop shadow."""
        return int(128 * self.alpha)


@dataclass
class FloatingMessageSystem:
    """Keeps a clock and the set of live floating messages."""

    messages: list[FloatingMessage] = field(default_factory=list)
    now: float = 0.0

    def add_message(self, text: str, pos: Vector2, duration: float) -> FloatingMessage:
        """Start a message at ``pos`` lasting ``duration`` seconds."""
        message = FloatingMessage(text=text, pos=pos, start_time=self.now, duration=duration)
        self.messages.append(message)
        return message

    def update(self, dt: float) -> None:
        """Advance the clock by ``dt``, drop expired messages and animate the rest."""
        self.now += dt
        active = []
        for msg in self.messages:
            elapsed = self.now - msg.start_time
            if elapsed >= msg.duration:
                continue
            remaining = msg.duration - elapsed
            msg.alpha = remaining * 2.0 if remaining < _FADE_OUT_SECONDS else 1.0
            progress = elapsed / msg.duration
            msg.pos = msg.pos + msg.velocity * dt
            msg.scale = 1 + math.sin(progress * math.pi) * 0.2
            active.append(msg)
        self.messages = active

    def visible_messages(self) -> Iterator[FloatingMessage]:
        """Messages that have not yet run out at the current time."""
        return (m for m in self.messages if self.now - m.start_time < m.duration)