from typing import Sequence, Tuple

from pwstrength.models import CharacterClasses, PatternFinding, Suggestion
from pwstrength.patterns import has_kind

MAX_SUGGESTIONS = 8
RECOMMENDED_LENGTH = 12
MIN_UNIQUE_RATIO = 0.7

PASSPHRASE = Suggestion('Consider a passphrase of several unrelated words', 12)


def generate_suggestions(length: int,
                         categories: CharacterClasses,
                         unique_char_count: int,
                         findings: Sequence[PatternFinding]) -> Tuple[Suggestion, ...]:
    """
    Pick the advice that applies to this password, highest impact first.

    Impact values are only used for ranking and display; they never feed
    back into the entropy figures.
    """
    candidates = []

    if length < RECOMMENDED_LENGTH:
        candidates.append(Suggestion('Increase the length to 12-16+ characters', 10))
    if not categories.has_uppercase:
        candidates.append(Suggestion('Add one or two uppercase letters in the middle', 5))
    if not categories.has_lowercase:
        candidates.append(Suggestion('Mix in some lowercase letters', 5))
    if not categories.has_symbols:
        candidates.append(Suggestion('Add 1-2 symbols, not at the end', 8))
    if not categories.has_digits:
        candidates.append(Suggestion('Include an unpredictable digit', 6))
    if unique_char_count < length * MIN_UNIQUE_RATIO:
        candidates.append(Suggestion('Use more distinct characters', 6))
    if has_kind(findings, 'common_word'):
        candidates.append(Suggestion('Avoid common words and their leet variants', 15))
    if has_kind(findings, 'sequence', 'alpha_sequence'):
        candidates.append(Suggestion('Replace simple runs with unpredictable combinations', 12))
    if has_kind(findings, 'date'):
        candidates.append(Suggestion('Avoid dates and other personal information', 8))

    candidates.append(PASSPHRASE)

    ranked = sorted(candidates, key=lambda s: s.impact_bits, reverse=True)
    return tuple(ranked[:MAX_SUGGESTIONS])
