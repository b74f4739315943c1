"Falling Words: type the words before they reach the bottom of the screen."

__version__ = '0.1.0'

from .session import GAME_OVER
from .session import PLAYING
from .session import START
from .session import Session
from .session import TITLE
from .wordlist import WordListError
from .wordlist import WordPool
from .wordlist import load_word_list
from .wordlist import read_word_list
