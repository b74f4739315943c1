import argparse
import contextlib
import functools
import logging
import os
import random

with open(os.devnull, 'w') as devnull, contextlib.redirect_stdout(devnull):
    import pygame as pg

from . import __version__
from .session import DEFAULT_DROP_INTERVAL
from .session import DEFAULT_FALL_RATE
from .session import DEFAULT_LIVES
from .session import GAME_OVER
from .session import PLAYING
from .session import START
from .session import Session
from .session import TITLE
from .wordlist import WordListError
from .wordlist import bundled_words_path
from .wordlist import read_word_list

logger = logging.getLogger(__name__)

SCREEN_SIZE = (640, 480)
FRAMERATE = 60
TITLE_FONT_SIZE = 24
FONT_SIZE = 20

FONT_COLOR = (100, 200, 200) # gopher blue
ACTIVE_COLOR = (18, 252, 10)
SHADOW_COLOR = (0, 0, 0)
BACKGROUND_COLOR = (20, 24, 40)

TITLE_LINES = ['FALLING WORDS'] + [''] * 10 + ['PRESS SPACE KEY TO START']


def keystroke(event):
    "Logical key for a KEYDOWN event: START, a typed character or None."
    if event.type != pg.KEYDOWN:
        return None
    if event.key == pg.K_SPACE:
        return START
    if len(event.unicode) == 1 and event.unicode.isprintable():
        return event.unicode
    return None

def parse_size(value):
    "argparse type for WIDTHxHEIGHT"
    try:
        width, height = (int(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected WIDTHxHEIGHT, got {value!r}')
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f'size must be positive, got {value!r}')
    return (width, height)

def gameover_lines(view):
    return ['GAME OVER', '', 'THANKS FOR PLAYING!', '', '',
            f'PLAYTIME (MINS): {view.elapsed_minutes}', '',
            f'WORDS COMPLETED: {view.words_completed}', '',
            f'WORDS PER MINUTE: {view.words_per_minute}',
            '', '', '', '', 'PRESS SPACE KEY TO CONTINUE']


class Clock:
    "Wrap pg Clock to remember what the framerate should be."

    def __init__(self, framerate):
        self.framerate = framerate
        self._clock = pg.time.Clock()
        self.get_fps = self._clock.get_fps

    def tick(self):
        return self._clock.tick(self.framerate)


class Screen:
    "Wrap the surface returned by pg.display.set_mode and keep a background to clear to."

    def __init__(self, size, background=None):
        self.surf = pg.display.set_mode(size)
        self.rect = self.surf.get_rect()
        if background is None:
            self.background = self.surf.copy()
            self.background.fill(BACKGROUND_COLOR)
        else:
            self.background = pg.transform.smoothscale(background.convert(), self.rect.size)

    def clear(self):
        self.surf.blit(self.background,(0,0))

    def update(self):
        pg.display.flip()


def draw_text_with_shadow(surf, text, font, position, color, shadow=SHADOW_COLOR):
    "Draw text with a single pixel offset shadow."
    x, y = position
    surf.blit(font.render(text, True, shadow), (x + 1, y + 1))
    surf.blit(font.render(text, True, color), (x, y))


class Renderer:
    "Draw a SessionView."

    def __init__(self, space, font, title_font):
        self.space = space
        self.font = font
        self.title_font = title_font
        self._draw = {
            TITLE: self.draw_title,
            PLAYING: self.draw_playing,
            GAME_OVER: self.draw_gameover,
        }

    def __call__(self, surf, view):
        self._draw[view.phase](surf, view)

    def centered_lines(self, surf, lines, top):
        line_height = self.title_font.get_linesize()
        for index, text in enumerate(lines):
            if not text:
                continue
            width, _ = self.title_font.size(text)
            x = (self.space.width - width) // 2
            draw_text_with_shadow(surf, text, self.title_font,
                                  (x, top + index * line_height), FONT_COLOR)

    def draw_title(self, surf, view):
        self.centered_lines(surf, TITLE_LINES, self.space.centery // 2)

    def draw_playing(self, surf, view):
        for word in view.words:
            color = ACTIVE_COLOR if word.active else FONT_COLOR
            draw_text_with_shadow(surf, word.text, self.font, (word.x, word.y), color)
        draw_text_with_shadow(surf, f'WORDS: {view.words_completed}', self.font,
                              (0, 0), FONT_COLOR)
        lives = f'LIVES: {view.lives}'
        width, _ = self.font.size(lives)
        draw_text_with_shadow(surf, lives, self.font,
                              (self.space.right - width, 0), FONT_COLOR)

    def draw_gameover(self, surf, view):
        self.centered_lines(surf, gameover_lines(view), self.title_font.get_linesize() * 2)


class DebugRenderer:
    "Right-aligned stack of diagnostic lines in the top corner."

    def __init__(self, screen):
        self.screen = screen
        self.font = pg.font.Font(None, 24)

    def __call__(self, lines):
        top = self.screen.rect.top
        for value in lines:
            image = self.font.render(value, True, (200,10,10))
            rect = image.get_rect(topright=(self.screen.rect.right, top))
            self.screen.surf.blit(image, rect)
            top = rect.bottom


class Engine:
    "Feed keystrokes to the session once per frame and draw what it shows."

    def __init__(self, clock, screen, session, renderer, debug_renderer=None):
        self.clock = clock
        self.screen = screen
        self.session = session
        self.renderer = renderer
        self.debug_renderer = debug_renderer

    def debug_lines(self, view):
        return [f'fps: {self.clock.get_fps():.1f}',
                f'phase: {view.phase}',
                f'pool: {len(self.session.pool)}',
                f'on screen: {len(view.words)}',
                f'drop interval: {self.session.drop_interval}']

    def run(self):
        running = True
        while running:
            self.clock.tick()
            keys = []
            for event in pg.event.get():
                if event.type == pg.QUIT:
                    running = False
                elif event.type == pg.KEYDOWN and event.key == pg.K_ESCAPE:
                    running = False
                else:
                    key = keystroke(event)
                    if key is not None:
                        keys.append(key)
            self.session.tick(keys)
            view = self.session.view()
            self.screen.clear()
            self.renderer(self.screen.surf, view)
            if self.debug_renderer:
                self.debug_renderer(self.debug_lines(view))
            self.screen.update()


def start(words_path=None, background_path=None, size=SCREEN_SIZE, framerate=FRAMERATE,
          lives=DEFAULT_LIVES, fall_rate=DEFAULT_FALL_RATE,
          drop_interval=DEFAULT_DROP_INTERVAL, seed=None, debug=False):
    "Setup and start the game"
    if words_path is None:
        words_path = bundled_words_path()
    load_words = functools.partial(read_word_list, words_path)
    # fail on a bad word list before a window opens
    load_words()
    npass, nfail = pg.init()
    if nfail:
        logger.warning('pygame init: %s modules passed, %s failed', npass, nfail)
    try:
        pg.display.set_caption('Falling Words')
        background = None
        if background_path is not None:
            background = pg.image.load(background_path)
        screen = Screen(size, background)
        font = pg.font.Font(None, FONT_SIZE)
        title_font = pg.font.Font(None, TITLE_FONT_SIZE)
        width, height = size
        session = Session(load_words, width, height, lives=lives,
                          drop_interval=drop_interval, fall_rate=fall_rate,
                          rng=random.Random(seed),
                          measure=lambda text: font.size(text)[0])
        debug_renderer = DebugRenderer(screen) if debug else None
        engine = Engine(Clock(framerate), screen, session,
                        Renderer(screen.rect, font, title_font),
                        debug_renderer=debug_renderer)
        engine.run()
    finally:
        pg.quit()

def main(argv=None):
    "Type the falling words before they hit the bottom."
    parser = argparse.ArgumentParser(prog='fallingwords', description=main.__doc__)
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--debug', action='store_true', help='Show debugging info on screen and log verbosely.')
    parser.add_argument('--words', metavar='PATH', help='JSON word list of {"word": ...} records.')
    parser.add_argument('--background', metavar='PATH', help='Background image scaled to the window.')
    parser.add_argument('--lives', type=int, default=DEFAULT_LIVES)
    parser.add_argument('--fall-rate', type=int, default=DEFAULT_FALL_RATE, help='Pixels per frame.')
    parser.add_argument('--drop-interval', type=int, default=DEFAULT_DROP_INTERVAL, help='Seconds between new words.')
    parser.add_argument('--size', type=parse_size, default=SCREEN_SIZE, metavar='WxH')
    parser.add_argument('--fps', type=int, default=FRAMERATE)
    parser.add_argument('--seed', type=int, help='Seed the word and position picks.')
    args = parser.parse_args(argv)
    if args.drop_interval < 1:
        parser.error('--drop-interval must be at least 1')
    if args.fall_rate < 0:
        parser.error('--fall-rate must not be negative')
    if args.lives < 1:
        parser.error('--lives must be at least 1')
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        start(words_path=args.words, background_path=args.background, size=args.size,
              framerate=args.fps, lives=args.lives, fall_rate=args.fall_rate,
              drop_interval=args.drop_interval, seed=args.seed, debug=args.debug)
    except (OSError, WordListError, pg.error) as exc:
        parser.exit(1, f'{parser.prog}: error: {exc}\n')

if __name__ == '__main__':
    main()
