"""Mood reflections: one opening, one mood line and one closing, picked at random."""
import enum
import random
from typing import Mapping, Sequence


class Mood(str, enum.Enum):
    CALM = "calm"
    FOCUSED = "focused"
    TIRED = "tired"
    MOTIVATED = "motivated"


OPENINGS: Sequence[str] = (
    "Today carries a quiet undercurrent.",
    "There’s a subtle shift in the air.",
    "Something within you feels different.",
    "The day unfolds with a gentle tone.",
)

MOOD_LINES: Mapping[Mood, Sequence[str]] = {
    Mood.CALM: (
        "Stillness becomes your advantage.",
        "Peace is not passive, it is powerful.",
        "Let silence sharpen your awareness.",
    ),
    Mood.FOCUSED: (
        "Clarity is your compass.",
        "Your attention feels deliberate and sharp.",
        "Depth comes easily when you let it.",
    ),
    Mood.TIRED: (
        "Softness is not weakness.",
        "Rest is part of progress.",
        "Move slowly, but move kindly.",
    ),
    Mood.MOTIVATED: (
        "Momentum hums beneath your skin.",
        "Energy gathers around intention.",
        "This is a day for beginning.",
    ),
}

CLOSINGS: Sequence[str] = (
    "Choose one meaningful step.",
    "Let the small act matter.",
    "Trust the rhythm you’re in.",
    "Begin without waiting for perfect conditions.",
)


_rng = random.Random()


def lines_for(mood: str) -> Sequence[str]:
    """Mood-specific pool; unknown moods get an empty pool."""
    try:
        return MOOD_LINES[Mood(mood)]
    except ValueError:
        return ()


def pick(pool: Sequence[str], rng: random.Random) -> str:
    # An empty pool yields an empty line rather than an error.
    return rng.choice(pool) if pool else ""


def generate_reflection(mood: str, rng: random.Random | None = None) -> str:
    rng = rng or _rng
    parts = (pick(OPENINGS, rng), pick(lines_for(mood), rng), pick(CLOSINGS, rng))
    return "\n".join(parts).strip()
