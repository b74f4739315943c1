import json
import logging
import os

logger = logging.getLogger(__name__)


class WordListError(ValueError):
    "Word list data could not be turned into a word pool."


def bundled_words_path():
    return os.path.join(os.path.dirname(__file__), 'data', 'words.json')


def upper(word):
    "Uppercase one character at a time, keeping those that would expand (ß -> SS)."
    return ''.join(c.upper() if len(c.upper()) == 1 else c for c in word)

def load_word_list(raw):
    """
    Parse a JSON word list into an uppercase word -> word mapping.

    :param raw: str or bytes holding a JSON array of records like
                ``{"word": "apple"}``.
    :raises WordListError: when the data is not such an array.
    """
    try:
        records = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise WordListError(f'invalid word list: {exc}') from exc
    if not isinstance(records, list):
        raise WordListError(f'word list must be an array, got {type(records).__name__}')
    words = {}
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not isinstance(record.get('word'), str):
            raise WordListError(f'record {index} has no "word" string: {record!r}')
        word = upper(record['word'].strip())
        if word:
            words.setdefault(word, word)
    return words


def read_word_list(path):
    with open(path, 'rb') as words_f:
        words = load_word_list(words_f.read())
    logger.info('Loaded %s words from %s', len(words), path)
    return words


class WordPool:
    "Words not yet introduced into play. Only ever shrinks."

    def __init__(self, words):
        self.available = dict(words)

    def __bool__(self):
        return bool(self.available)

    def __contains__(self, key):
        return key in self.available

    def __iter__(self):
        return iter(self.available)

    def __len__(self):
        return len(self.available)

    def eligible(self, exclude=()):
        "Available keys not in `exclude`, in pool order."
        return [key for key in self.available if key not in exclude]

    def take(self, key):
        return self.available.pop(key)
