import pytest

from dungeonmaze.config import StageConfig, odd_dimension, round_up_to_even

def test_round_up_to_even():
    assert round_up_to_even(0) == 0
    assert round_up_to_even(3) == 4
    assert round_up_to_even(4) == 4

def test_dimensions_forced_odd():
    assert odd_dimension(79) == 79
    assert odd_dimension(80) == 79
    cfg = StageConfig(width=10, height=22)
    assert (cfg.width, cfg.height) == (9, 21)

def test_defaults():
    cfg = StageConfig()
    assert (cfg.width, cfg.height, cfg.room_fill_rate) == (79, 21, 20)
    assert cfg.animate is False

def test_too_small_rejected():
    with pytest.raises(ValueError):
        StageConfig(width=2, height=9)

def test_fill_rate_bounds():
    StageConfig(room_fill_rate=0)
    StageConfig(room_fill_rate=100)
    with pytest.raises(ValueError):
        StageConfig(room_fill_rate=101)
    with pytest.raises(ValueError):
        StageConfig(room_fill_rate=-1)
