import pytest

from pwstrength.patterns import CHECKS, detect_patterns, normalize_leet


def kinds(password):
    findings, _ = detect_patterns(password)
    return [f.kind for f in findings]


def test_normalize_leet():
    assert normalize_leet('P@$$w0rd') == 'password'
    assert normalize_leet('L3TM31N') == 'letmein'
    assert normalize_leet('7r4sh') == 'trash'


@pytest.mark.parametrize('password, kind, match', [
    ('xxxxq', 'repetition', 'xxxx'),
    ('Qabababz', 'repeated_pattern', 'ababab'),
    ('pin7890', 'sequence', '7890'),
    ('pin0987', 'sequence', '0987'),
    ('ZYXw', 'alpha_sequence', 'ZYX'),
    ('Adm1n!', 'common_word', 'admin'),
    ('born1987-06', 'date', '1987-06'),
])
def test_each_check_reports_its_match(password, kind, match):
    findings, _ = detect_patterns(password)
    found = {f.kind: f for f in findings}
    assert kind in found
    assert found[kind].match == match


def test_penalties_are_fixed_per_kind():
    penalties = {check.kind: check.penalty_bits for check in CHECKS}
    assert penalties == {
        'repetition': 10,
        'repeated_pattern': 8,
        'sequence': 12,
        'alpha_sequence': 10,
        'common_word': 25,
        'date': 8,
    }


def test_findings_follow_check_order_and_sum():
    findings, total = detect_patterns('aaaa1234')
    assert [f.kind for f in findings] == ['repetition', 'sequence']
    assert total == 22


def test_kind_fires_once_even_with_several_occurrences():
    assert kinds('aaaa-bbbb-cccc') == ['repetition']


def test_years_outside_range_are_not_dates():
    assert 'date' not in kinds('x2030x')
    assert 'date' not in kinds('x1899x')
    assert 'date' in kinds('x2029x')


def test_empty_password_has_no_findings():
    assert detect_patterns('') == ([], 0)


def test_random_looking_password_is_clean():
    assert kinds('k9#Vq!mZ2w') == []
