import os

import pytest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

from fallingwords.session import Session


class FakeClock:

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FirstPick:
    "Random source that always takes the first option and the lowest number."

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return a


@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def rng():
    return FirstPick()

@pytest.fixture
def make_session(clock, rng):
    def make_session(words=('APPLE', 'GRAPE'), **kwargs):
        kwargs.setdefault('width', 640)
        kwargs.setdefault('height', 480)
        kwargs.setdefault('clock', clock)
        kwargs.setdefault('rng', rng)
        return Session(lambda: {word: word for word in words}, **kwargs)
    return make_session
