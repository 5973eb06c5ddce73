import math

import pytest

from pwstrength import charsets
from pwstrength.analyzer import (
    analyze_password, calculate_entropy, score_from_entropy
)
from pwstrength.models import PatternFinding


def kinds(analysis):
    return {p.kind for p in analysis.detected_patterns}


def test_weak_numeric_sequence():
    analysis = analyze_password('123456')
    assert analysis.strength_label == 'Very weak'
    assert analysis.score < 20
    assert 'sequence' in kinds(analysis)


def test_leet_common_word():
    analysis = analyze_password('P@ssw0rd')
    assert 'common_word' in kinds(analysis)
    assert analysis.effective_entropy_bits < analysis.raw_entropy_bits
    assert analysis.effective_entropy_bits < 30


def test_long_passphrase_scores_high():
    analysis = analyze_password('ChansonBleue-Soleil+Prairie2024!')
    assert analysis.score > 60
    assert analysis.strength_label in ('Strong', 'Very strong')
    assert 'common_word' not in kinds(analysis)


@pytest.mark.parametrize('bits, label', [
    (10, 'Very weak'),
    (27.99, 'Very weak'),
    (28, 'Weak'),
    (30, 'Weak'),
    (36, 'Medium'),
    (50, 'Medium'),
    (60, 'Strong'),
    (70, 'Strong'),
    (80, 'Very strong'),
    (90, 'Very strong'),
])
def test_label_thresholds(bits, label):
    assert score_from_entropy(bits)[1] == label


def test_score_scale_and_clamp():
    assert score_from_entropy(50)[0] == 60
    assert score_from_entropy(10)[0] == 12
    assert score_from_entropy(0.5)[0] == 1
    assert score_from_entropy(83.4)[0] == 100
    assert score_from_entropy(500)[0] == 100


@pytest.mark.parametrize('password', [
    'a', 'aaaa', 'aaaa1111', '123456', 'P@ssw0rd', 'Tr0ub4dor&3',
    'correct horse battery staple', 'x' * 200, 'é',
])
def test_effective_entropy_bounds(password):
    analysis = analyze_password(password)
    assert analysis.effective_entropy_bits >= 1
    assert analysis.effective_entropy_bits <= analysis.raw_entropy_bits


def test_repetition_adds_flat_extra_penalty():
    findings = [PatternFinding('repetition', 'x', 10)]
    raw, penalties, effective = calculate_entropy('aaaa', 26, 10, findings)
    assert raw == pytest.approx(4 * math.log2(26))
    assert penalties == 15
    assert effective == pytest.approx(raw - 15)


def test_common_word_extra_penalty_floors_entropy():
    findings = [PatternFinding('common_word', 'x', 25)]
    raw, penalties, effective = calculate_entropy('P@ssw0rd', 94, 25, findings)
    assert penalties == pytest.approx(25 + raw - 15)
    assert effective == 1


def test_character_classes_and_set_size():
    analysis = analyze_password('aB3!')
    c = analysis.categories
    assert (c.has_lowercase, c.has_uppercase, c.has_digits, c.has_symbols) == (True, True, True, True)
    assert analysis.character_set_size == 26 + 26 + 10 + len(charsets.SYMBOLS)

    only_digits = analyze_password('8080')
    assert only_digits.character_set_size == 10


def test_non_ascii_counts_as_symbol():
    classes = charsets.detect_classes('é ')
    assert classes.has_symbols
    assert not classes.has_lowercase


def test_diversity_and_unique_count():
    analysis = analyze_password('aabb')
    assert analysis.unique_char_count == 2
    assert analysis.diversity_ratio == 0.5


def test_empty_password_is_degenerate_but_defined():
    analysis = analyze_password('')
    assert analysis.length == 0
    assert analysis.character_set_size == 0
    assert analysis.raw_entropy_bits == 0
    assert analysis.effective_entropy_bits == 1
    assert analysis.diversity_ratio == 0
    assert analysis.detected_patterns == ()
    assert analysis.strength_label == 'Very weak'


def test_result_carries_crack_times_suggestions_and_notes():
    analysis = analyze_password('hunter2')
    assert analysis.crack_times.offline_fast.formatted_time
    assert analysis.suggestions[0].impact_bits >= analysis.suggestions[-1].impact_bits
    assert 'Educational estimate, not an exact duration' in analysis.notes
