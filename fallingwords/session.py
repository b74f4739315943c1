import collections
import logging
import random
import time

from .engine import FallSimulator
from .engine import InputResolver
from .engine import SpawnScheduler
from .stats import SessionStats
from .wordlist import WordPool

logger = logging.getLogger(__name__)

TITLE = 'title'
PLAYING = 'playing'
GAME_OVER = 'game-over'

# logical "start" action, distinct from any single typed character
START = 'start'

DEFAULT_LIVES = 5
DEFAULT_DROP_INTERVAL = 2 # seconds between new words
DEFAULT_FALL_RATE = 1 # pixels per tick
DIFFICULTY_THRESHOLD = 35

WordView = collections.namedtuple('WordView', 'text x y active')

SessionView = collections.namedtuple(
    'SessionView',
    'phase lives words_completed words elapsed_minutes words_per_minute')


class Session:
    """
    One player's run through the word list, from title screen to game over
    and back.

    :param load_words: callable returning the word -> word mapping that fills
                       the pool. Called now and on every restart; errors
                       propagate.
    :param clock: callable returning monotonic seconds.
    :param rng: random.Random-like source for spawns.
    :param measure: callable giving the rendered width of a word.
    """

    def __init__(self, load_words, width, height, lives=DEFAULT_LIVES,
                 drop_interval=DEFAULT_DROP_INTERVAL, fall_rate=DEFAULT_FALL_RATE,
                 clock=time.monotonic, rng=None, measure=None):
        if drop_interval < 1:
            raise ValueError(f'drop interval must be at least 1 second, got {drop_interval}')
        if fall_rate < 0:
            raise ValueError(f'fall rate must not be negative, got {fall_rate}')
        if lives < 1:
            raise ValueError(f'lives must be at least 1, got {lives}')
        if rng is None:
            rng = random.Random()
        self.load_words = load_words
        self.width = width
        self.height = height
        self.default_lives = lives
        self.default_drop_interval = drop_interval
        self.fall_rate = fall_rate
        self.clock = clock
        self.resolver = InputResolver()
        self.simulator = FallSimulator(height)
        self.scheduler = SpawnScheduler(width, rng, measure)
        self.reset()

    @property
    def finished(self):
        return not self.pool and not self.words

    def reset(self):
        "Fresh pool, lives and statistics, back on the title screen."
        pool = WordPool(self.load_words())
        self.phase = TITLE
        self.pool = pool
        self.words = {}
        self.lives = self.default_lives
        self.drop_interval = self.default_drop_interval
        self.stats = SessionStats()
        self.resolver.reset()
        self.scheduler.reset()

    def begin(self):
        self.phase = PLAYING
        self.stats.start(self.clock())
        logger.info('Playing with %s words and %s lives', len(self.pool), self.lives)

    def end(self):
        self.stats.finish(self.clock())
        self.phase = GAME_OVER
        logger.info('Game over: %s words in %s minutes (%s wpm), %s lives left',
                    self.stats.words_completed, self.stats.elapsed_minutes,
                    self.stats.words_per_minute, self.lives)

    def tick(self, keys=()):
        "Advance one frame, consuming the keystrokes pressed since the last."
        if self.phase == TITLE:
            if START in keys:
                self.begin()
        elif self.phase == PLAYING:
            self.update_playing(keys)
        elif self.phase == GAME_OVER:
            if START in keys:
                self.reset()

    def update_playing(self, keys):
        for key in keys:
            self.press(key)
            if self.phase != PLAYING:
                return
        for identity in self.simulator.advance(self.words, self.fall_rate):
            self.miss(identity)
        if self.lives <= 0:
            self.end()
            return
        elapsed = self.stats.since_start(self.clock())
        self.scheduler.spawn(elapsed, self.drop_interval, self.pool, self.words)
        self.ramp_difficulty()
        if self.finished:
            self.end()

    def press(self, key):
        outcome = self.resolver.resolve(self.words, key)
        if outcome.completed:
            self.stats.words_completed += 1
            logger.debug('completed %s', outcome.identity)
            if self.finished:
                self.end()

    def miss(self, identity):
        self.resolver.forget(identity)
        self.lives -= 1
        logger.debug('missed %s, %s lives left', identity, self.lives)

    def ramp_difficulty(self):
        # one step only; a real difficulty curve would replace this
        if (self.stats.words_completed >= DIFFICULTY_THRESHOLD
                and self.drop_interval == self.default_drop_interval
                and self.drop_interval > 1):
            self.drop_interval -= 1
            logger.info('Difficulty up: a new word every %s seconds', self.drop_interval)

    def view(self):
        "Snapshot for drawing. Holds no references back into the session."
        words = tuple(WordView(word.text, word.x, word.y, word.active)
                      for word in self.words.values())
        return SessionView(self.phase, self.lives, self.stats.words_completed, words,
                           self.stats.elapsed_minutes, self.stats.words_per_minute)
