"""
Per-tick pieces of the simulation.

Each works on the session's on-screen words: a dict of identity ->
WordEntity in spawn order. Iteration follows that order, so simultaneous
misses and tie-breaks come out the same way every run.
"""
import collections
import logging
import operator

from .words import WordEntity

logger = logging.getLogger(__name__)

# width of one glyph of the default 14px monospace font
GLYPH_WIDTH = 14

Outcome = collections.namedtuple('Outcome', 'identity completed')

NOTHING = Outcome(None, False)


def default_measure(text):
    return len(text) * GLYPH_WIDTH

def matches(character, key):
    return bool(character) and character.casefold() == key.casefold()


class InputResolver:
    "Route keystrokes to at most one word, locking onto it until it is typed."

    def __init__(self):
        self.active = None

    def reset(self):
        self.active = None

    def forget(self, identity):
        if self.active == identity:
            self.active = None

    def check(self, words):
        "Repair the single-active-word invariant if something broke it."
        if self.active not in words:
            self.active = None
        flagged = [word for word in words.values() if word.active]
        if not flagged:
            self.active = None
        elif len(flagged) > 1 or flagged[0].identity != self.active:
            logger.error('active words out of sync (tracking %r, flagged %r); clearing',
                         self.active, [word.identity for word in flagged])
            for word in flagged:
                word.deactivate()
            self.active = None

    def resolve(self, words, key):
        """
        Apply one keystroke. Completed words are removed from `words`.

        :return: Outcome naming the affected word, if any.
        """
        if not isinstance(key, str) or len(key) != 1:
            return NOTHING
        self.check(words)
        if self.active is not None:
            target = words[self.active]
            if not matches(target.first, key):
                # wrong letters cost nothing
                return NOTHING
        else:
            candidates = [word for word in words.values() if matches(word.first, key)]
            if not candidates:
                return NOTHING
            # lowest on screen is the most urgent; max keeps the first on ties
            target = max(candidates, key=operator.attrgetter('y'))
            target.activate()
            self.active = target.identity
        target.strip()
        if target.complete:
            del words[target.identity]
            self.active = None
            return Outcome(target.identity, True)
        return Outcome(target.identity, False)


class FallSimulator:
    "Move every word down and collect those past the bottom."

    def __init__(self, height):
        self.height = height

    def advance(self, words, rate):
        missed = []
        for word in words.values():
            word.fall(rate)
            if word.y > self.height:
                missed.append(word.identity)
        for identity in missed:
            del words[identity]
        return missed


class SpawnScheduler:
    "Drop a new word every `interval` seconds, at most once per second."

    def __init__(self, width, rng, measure=None):
        if measure is None:
            measure = default_measure
        self.width = width
        self.rng = rng
        self.measure = measure
        self.last_second = None

    def reset(self):
        self.last_second = None

    def due(self, elapsed, interval):
        second = int(elapsed)
        return second % interval == 0 and second != self.last_second

    def spawn(self, elapsed, interval, pool, words):
        """
        Move one word from `pool` onto the screen if a spawn is due.

        :return: the new WordEntity or None.
        """
        if not self.due(elapsed, interval):
            return None
        self.last_second = int(elapsed)
        eligible = pool.eligible(words)
        if not eligible:
            return None
        text = pool.take(self.rng.choice(eligible))
        x = self.rng.randint(0, max(0, self.width - self.measure(text)))
        word = words[text] = WordEntity(text, x)
        logger.debug('spawned %s at x=%s', text, x)
        return word
