from fallingwords.stats import SessionStats
from fallingwords.stats import round_two


def test_round_two_half_away_from_zero():
    assert round_two(0.125) == 0.13
    assert round_two(-0.125) == -0.13
    assert round_two(1.0) == 1.0

def test_words_per_minute():
    stats = SessionStats()
    stats.start(10.0)
    stats.words_completed = 12
    stats.finish(100.0)
    assert stats.elapsed == 90.0
    assert stats.elapsed_minutes == 1.5
    assert stats.words_per_minute == 8.0

def test_zero_elapsed_gives_zero_rate():
    stats = SessionStats()
    stats.start(5.0)
    stats.words_completed = 3
    stats.finish(5.0)
    assert stats.words_per_minute == 0.0
    assert stats.elapsed_minutes == 0.0

def test_finish_is_frozen():
    stats = SessionStats()
    stats.start(0.0)
    stats.finish(60.0)
    stats.finish(600.0)
    assert stats.elapsed == 60.0
    assert stats.finished

def test_unfinished_stats():
    stats = SessionStats()
    assert not stats.finished
    assert stats.words_per_minute == 0.0
    assert stats.since_start(42.0) == 0.0
