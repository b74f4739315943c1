import math


def round_two(number):
    "Round half away from zero to two decimal places."
    return math.copysign(math.floor(abs(number) * 100 + 0.5) / 100, number)


class SessionStats:
    "Bookkeeping for the game over summary."

    def __init__(self):
        self.start_time = None
        self.elapsed = None
        self.words_completed = 0

    @property
    def finished(self):
        return self.elapsed is not None

    def start(self, now):
        self.start_time = now

    def since_start(self, now):
        if self.start_time is None:
            return 0.0
        return now - self.start_time

    def finish(self, now):
        "Freeze the elapsed time. Only the first call counts."
        if self.elapsed is None:
            self.elapsed = self.since_start(now)

    @property
    def minutes(self):
        return (self.elapsed or 0.0) / 60

    @property
    def elapsed_minutes(self):
        return round_two(self.minutes)

    @property
    def words_per_minute(self):
        # instantaneous sessions have no meaningful rate
        if self.minutes <= 0:
            return 0.0
        return round_two(self.words_completed / self.minutes)
