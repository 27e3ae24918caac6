import random

import pytest

from auraboard.services.reflection_service import (
    CLOSINGS,
    MOOD_LINES,
    OPENINGS,
    Mood,
    generate_reflection,
    lines_for,
)


@pytest.mark.parametrize("mood", [m.value for m in Mood])
def test_recognized_mood_uses_all_three_pools(mood):
    opening, middle, closing = generate_reflection(mood, random.Random(7)).split("\n")
    assert opening in OPENINGS
    assert middle in MOOD_LINES[Mood(mood)]
    assert closing in CLOSINGS


@pytest.mark.parametrize("mood", ["grumpy", "", "CALM"])
def test_unrecognized_mood_leaves_middle_empty(mood):
    opening, middle, closing = generate_reflection(mood, random.Random(3)).split("\n")
    assert opening in OPENINGS
    assert middle == ""
    assert closing in CLOSINGS


def test_same_seed_same_reflection():
    assert generate_reflection("tired", random.Random(42)) == generate_reflection("tired", random.Random(42))


def test_every_line_reachable():
    rng = random.Random(0)
    seen = {generate_reflection("focused", rng).split("\n")[1] for _ in range(200)}
    assert seen == set(MOOD_LINES[Mood.FOCUSED])


def test_lines_for_unknown_is_empty():
    assert lines_for("sleepy") == ()


def test_pool_sizes():
    assert len(OPENINGS) == 4
    assert len(CLOSINGS) == 4
    assert all(len(lines) == 3 for lines in MOOD_LINES.values())


@pytest.mark.anyio
async def test_reflection_endpoint(client):
    res = await client.post("/reflection", json={"mood": "motivated"})
    assert res.status_code == 200
    lines = res.json()["reflection"].split("\n")
    assert lines[0] in OPENINGS
    assert lines[1] in MOOD_LINES[Mood.MOTIVATED]
    assert lines[2] in CLOSINGS


@pytest.mark.anyio
async def test_reflection_endpoint_unknown_mood(client):
    res = await client.post("/reflection", json={"mood": "hungry"})
    assert res.status_code == 200
    assert res.json()["reflection"].split("\n")[1] == ""
