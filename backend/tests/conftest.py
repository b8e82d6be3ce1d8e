"""
Shared fixtures for the simulator tests.
"""

import pytest

from socceroo.simulator.models import Team


class SequenceRandom:
    """Random source that replays a fixed sequence of draws, cycling."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def always_score():
    """Every opportunity is converted (draw 0 <= any clamped chance)."""
    return SequenceRandom([0])


@pytest.fixture
def never_score():
    """Draw 99 is above any chance an evenly matched pair can reach."""
    return SequenceRandom([99])


@pytest.fixture
def four_teams():
    """A four-team roster in draw order."""
    return [
        Team(name="Team One", key="T1", rating=80),
        Team(name="Team Two", key="T2", rating=75),
        Team(name="Team Three", key="T3", rating=70),
        Team(name="Team Four", key="T4", rating=65),
    ]


@pytest.fixture
def sequence_random():
    """Factory for random sources replaying the given draws."""
    return SequenceRandom
