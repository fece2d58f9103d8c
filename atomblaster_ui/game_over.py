"""Statistics and text shown on the game over screen."""

from __future__ import annotations

from dataclasses import dataclass


def rescue_rate(rescued: int, total: int) -> int:
    """Percentage of scientists rescued, truncated; 0 when there were none."""
    if total <= 0:
        return 0
    scaled = rescued * 100
    quotient = abs(scaled) // total
    return quotient if scaled >= 0 else -quotient


def performance_message(percent: int) -> str:
    """Verdict on the rescue rate."""
    if percent == 100:
        return "Perfect rescue! All scientists saved!"
    if percent >= 75:
        return "Great job! Most scientists rescued!"
    if percent >= 50:
        return "Good work! Half the scientists saved."
    if percent >= 25:
        return "Some scientists rescued, try harder next time."
    return "Few scientists saved. Practice your flying!"


def format_clock(seconds: int) -> str:
    """Format a duration in seconds as MM:SS."""
    minutes = abs(seconds) // 60
    if seconds < 0:
        minutes = -minutes
    remainder = seconds - minutes * 60
    return f"{minutes:02d}:{remainder:02d}"


@dataclass
class GameOverSummary:
    """Final statistics of a finished game."""

    score: int
    level: int
    elapsed_time: int
    scientists_rescued: int | None = None
    total_scientists: int | None = None
    max_level: int = 10

    def lines(self) -> list[str]:
        """The lines of text on the game over screen, top to bottom."""
        result = [
            "GAME OVER",
            f"Final Score: {self.score}",
            f"Level Reached: {self.level}/{self.max_level}",
            f"Time: {format_clock(self.elapsed_time)}",
        ]
        if self.scientists_rescued is not None and self.total_scientists is not None:
            percent = rescue_rate(self.scientists_rescued, self.total_scientists)
            result += [
                f"Scientists Rescued: {self.scientists_rescued}/{self.total_scientists}",
                f"Rescue Rate: {percent}%",
                performance_message(percent),
            ]
        result.append("Press R to Restart or Q to Quit")
        return result