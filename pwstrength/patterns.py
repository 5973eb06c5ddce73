"""
Weak-pattern detection.

Every check is an entry of ``CHECKS``: a kind, a user-facing message, a
fixed penalty in bits and a finder returning the offending substring (or
``None``). Checks run in declaration order and each kind fires at most once.
"""
import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from pwstrength.models import PatternFinding

COMMON_WORDS = (
    'password', 'motdepasse', 'qwerty', 'azerty', 'welcome', 'admin',
    'letmein', 'football', 'monkey', 'iloveyou', 'dragon', 'sunshine',
    'princess', 'baseball', 'starwars', 'superman', 'shadow', 'master',
)

LEET_MAP = {
    '0': 'o',
    '1': 'i',
    '3': 'e',
    '4': 'a',
    '@': 'a',
    '$': 's',
    '5': 's',
    '7': 't',
}

NUMERIC_RUNS = (
    '0123', '1234', '2345', '3456', '4567', '5678', '6789', '7890',
    '0987', '9876', '8765', '7654', '6543', '5432', '4321', '3210',
)
ALPHA_RUNS = ('abcd', 'bcde', 'cdef', 'defg', 'gfed', 'fedc', 'edcb', 'zyx', 'cba')

REPEATED_PATTERN_EXTRA_BITS = 5
COMMON_WORD_FREE_BITS = 15

_REPETITION_RE      = re.compile(r'(.)\1{3,}', re.DOTALL)
_REPEATED_BLOCK_RE  = re.compile(r'(.{2,})\1{2,}', re.DOTALL)
_NUMERIC_RUN_RE     = re.compile('|'.join(NUMERIC_RUNS))
_ALPHA_RUN_RE       = re.compile('|'.join(ALPHA_RUNS), re.IGNORECASE)
_DATE_RE            = re.compile(r'(?:19\d{2}|20[0-2]\d)(?:[^\d]?(?:1[0-2]|0?[1-9]))?')


def normalize_leet(password: str) -> str:
    """Lower-case and undo common leet substitutions (``P@ssw0rd`` -> ``password``)."""
    return ''.join(LEET_MAP.get(c, c) for c in password.lower())


def _search(regex: 're.Pattern[str]') -> Callable[[str], Optional[str]]:
    def finder(password: str) -> Optional[str]:
        m = regex.search(password)
        return m.group(0) if m else None
    return finder


def _common_word(password: str) -> Optional[str]:
    normalized = normalize_leet(password)
    for word in COMMON_WORDS:
        if word in normalized:
            return word
    return None


class PatternCheck(NamedTuple):
    kind:         str
    message:      str
    penalty_bits: int
    find:         Callable[[str], Optional[str]]


CHECKS: Tuple[PatternCheck, ...] = (
    PatternCheck('repetition', 'Long run of a repeated character', 10, _search(_REPETITION_RE)),
    PatternCheck('repeated_pattern', 'Repeated block of characters', 8, _search(_REPEATED_BLOCK_RE)),
    PatternCheck('sequence', 'Simple numeric sequence', 12, _search(_NUMERIC_RUN_RE)),
    PatternCheck('alpha_sequence', 'Alphabetic sequence', 10, _search(_ALPHA_RUN_RE)),
    PatternCheck('common_word', 'Common word or leet variant', 25, _common_word),
    PatternCheck('date', 'Looks like a date', 8, _search(_DATE_RE)),
)


def detect_patterns(password: str) -> Tuple[List[PatternFinding], float]:
    """Run every check; return the findings in order and the sum of their penalties."""
    findings: List[PatternFinding] = []
    if not password:
        return findings, 0

    for check in CHECKS:
        match = check.find(password)
        if match is not None:
            findings.append(PatternFinding(check.kind, check.message, check.penalty_bits, match))

    return findings, sum(f.penalty_bits for f in findings)


def has_kind(findings, *kinds: str) -> bool:
    return any(f.kind in kinds for f in findings)
