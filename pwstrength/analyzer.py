"""
analyzer.py — heuristic strength analysis.

password -> character classes -> weak patterns -> entropy -> score/label
-> crack times -> suggestions.

Everything here is a pure function of the password; nothing is logged or
kept.
"""
import math
from typing import Sequence, Tuple

from pwstrength import charsets
from pwstrength.crack_time import estimate_crack_times
from pwstrength.models import AnalysisResult, PatternFinding
from pwstrength.patterns import (
    COMMON_WORD_FREE_BITS, REPEATED_PATTERN_EXTRA_BITS, detect_patterns, has_kind
)
from pwstrength.suggestions import generate_suggestions

VERY_WEAK   = 'Very weak'
WEAK        = 'Weak'
MEDIUM      = 'Medium'
STRONG      = 'Strong'
VERY_STRONG = 'Very strong'

# (exclusive upper bound in bits, label)
LABEL_THRESHOLDS = (
    (28, VERY_WEAK),
    (36, WEAK),
    (60, MEDIUM),
    (80, STRONG),
)

# Scores reach 100 at ~83 bits, not 100
SCORE_SCALE = 120

NOTES = (
    'Indicative result',
    'Educational estimate, not an exact duration',
)


def calculate_entropy(password: str,
                      character_set_size: int,
                      base_penalty_bits: float,
                      findings: Sequence[PatternFinding]) -> Tuple[float, float, float]:
    """Return ``(raw, penalties, effective)`` in bits. Effective is never below 1."""
    raw = len(password) * math.log2(max(character_set_size, 1))
    penalties = base_penalty_bits

    if has_kind(findings, 'common_word'):
        penalties += max(raw - COMMON_WORD_FREE_BITS, 0)
    if has_kind(findings, 'repetition', 'repeated_pattern'):
        penalties += REPEATED_PATTERN_EXTRA_BITS

    effective = max(raw - penalties, 1)
    return raw, penalties, effective


def score_from_entropy(effective_entropy_bits: float) -> Tuple[int, str]:
    label = VERY_STRONG
    for upper, name in LABEL_THRESHOLDS:
        if effective_entropy_bits < upper:
            label = name
            break

    scaled = effective_entropy_bits / 100 * SCORE_SCALE
    score = max(0, min(100, int(math.floor(scaled + 0.5))))
    return score, label


def analyze_password(password: str) -> AnalysisResult:
    length = len(password)
    categories = charsets.detect_classes(password)
    set_size = charsets.character_set_size(categories)
    unique = len(set(password))
    diversity = unique / max(length, 1) if set_size else 0.0

    findings, penalty_bits = detect_patterns(password)
    raw, penalties, effective = calculate_entropy(password, set_size, penalty_bits, findings)
    score, label = score_from_entropy(effective)

    return AnalysisResult(
        length=length,
        categories=categories,
        character_set_size=set_size,
        unique_char_count=unique,
        diversity_ratio=diversity,
        raw_entropy_bits=raw,
        penalties_bits=penalties,
        effective_entropy_bits=effective,
        score=score,
        strength_label=label,
        detected_patterns=tuple(findings),
        crack_times=estimate_crack_times(effective),
        suggestions=generate_suggestions(length, categories, unique, findings),
        notes=NOTES,
    )
