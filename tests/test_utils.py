import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
import pytest

from state import Need
from utils import format_time, need_level


@pytest.mark.parametrize('time, text', [
    (0, '00:00'),
    (8, '08:00'),
    (13.5, '13:30'),
    (23.75, '23:45'),
])
def test_format_time(time, text):
    assert format_time(time) == text


def test_need_level_for_needs_that_should_stay_high():
    """Energy, health and friends are good at 70 and poor below 40."""

    assert need_level(Need.ENERGY, 70) == 'good'
    assert need_level(Need.HEALTH, 40) == 'fair'
    assert need_level(Need.CLEANLINESS, 39.5) == 'poor'


def test_need_level_for_needs_that_should_stay_low():
    """Hunger, thirst and sleepiness are reversed."""

    assert need_level(Need.HUNGER, 30) == 'good'
    assert need_level(Need.THIRST, 60) == 'fair'
    assert need_level(Need.SLEEPINESS, 61) == 'poor'
