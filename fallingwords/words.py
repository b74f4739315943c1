class WordEntity:
    "A falling word. Keyed by its original text while it is on screen."

    def __init__(self, identity, x, y=0):
        self.identity = identity
        self.text = identity
        self.x = x
        self.y = y
        self.active = False

    def __repr__(self):
        return (f'{self.__class__.__name__}({self.identity!r}, text={self.text!r}, '
                f'x={self.x}, y={self.y}, active={self.active})')

    @property
    def complete(self):
        return not self.text

    @property
    def first(self):
        "Next character to type, or empty string when complete."
        return self.text[:1]

    def activate(self):
        self.active = True

    def deactivate(self):
        self.active = False

    def fall(self, rate):
        self.y += rate

    def strip(self):
        self.text = self.text[1:]
