import math

import pytest

from pwstrength.crack_time import estimate_crack_times, format_time, mean_guesses


@pytest.mark.parametrize('seconds, expected', [
    (0, '<1 second'),
    (0.99, '<1 second'),
    (1, '1 second'),
    (59, '59 seconds'),
    (90, '2 minutes'),
    (3600, '1 hour'),
    (2 * 86400, '2 days'),
    (2629800, '1 month'),
    (10 * 31557600, '10 years'),
    (5000 * 31557600, '5000 years'),
    (6000 * 31557600, 'thousands of years'),
    (math.inf, 'thousands of years'),
])
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_mean_guesses_floor_and_overflow():
    assert mean_guesses(0.5) == 1
    assert mean_guesses(1) == 1
    assert mean_guesses(11) == 1024
    assert mean_guesses(5000) == math.inf


def test_scenarios_use_fixed_rates():
    times = estimate_crack_times(11)
    assert times.offline_fast.guesses_per_second == 1e10
    assert times.offline_medium.guesses_per_second == 1e8
    assert times.online_limited.guesses_per_second == 10
    assert times.online_limited.time_seconds == pytest.approx(102.4)
    assert times.online_limited.formatted_time == '2 minutes'
    assert times.offline_fast.formatted_time == '<1 second'
    assert [s.id for s in times] == ['offline_fast', 'offline_medium', 'online_limited']


def test_huge_entropy_collapses_to_thousands_of_years():
    times = estimate_crack_times(2000)
    assert all(s.formatted_time == 'thousands of years' for s in times)
