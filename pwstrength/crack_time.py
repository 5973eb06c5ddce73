"""
Crack-time estimates for three attacker speeds.

The figures are rough, educational orders of magnitude: the mean number of
guesses is 2^(bits - 1) and each scenario divides it by a fixed rate.
"""
import math

from pwstrength.models import CrackScenario, CrackTimes

SCENARIOS = (
    ('offline_fast', 'fast offline', 1e10),
    ('offline_medium', 'medium offline', 1e8),
    ('online_limited', 'rate-limited online', 10),
)

# (label, seconds per unit), smallest first
TIME_UNITS = (
    ('second', 1),
    ('minute', 60),
    ('hour', 3600),
    ('day', 86400),
    ('month', 2629800),
    ('year', 31557600),
)

MAX_YEARS = 5000

BELOW_ONE_SECOND = '<1 second'
THOUSANDS_OF_YEARS = 'thousands of years'


def mean_guesses(effective_entropy_bits: float) -> float:
    """2^(bits-1), floored at 1 guess; ``inf`` once the result overflows a float."""
    exponent = max(effective_entropy_bits - 1, 0)
    try:
        return math.pow(2, exponent)
    except OverflowError:
        return math.inf


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_time(seconds: float) -> str:
    if math.isnan(seconds) or seconds < 1:
        return BELOW_ONE_SECOND
    if math.isinf(seconds):
        return THOUSANDS_OF_YEARS

    for label, size in reversed(TIME_UNITS):
        if seconds >= size:
            amount = _round_half_up(seconds / size)
            if label == 'year' and amount > MAX_YEARS:
                return THOUSANDS_OF_YEARS
            plural = 's' if amount > 1 else ''
            return f'{amount} {label}{plural}'


def estimate_crack_times(effective_entropy_bits: float) -> CrackTimes:
    guesses = mean_guesses(effective_entropy_bits)
    scenarios = {}
    for key, label, rate in SCENARIOS:
        seconds = guesses / rate
        scenarios[key] = CrackScenario(
            id=key,
            label=label,
            guesses_per_second=rate,
            time_seconds=seconds,
            formatted_time=format_time(seconds),
        )
    return CrackTimes(**scenarios)
