"""
Character alphabets shared by the analyzer and the generator.
"""
import string

from pwstrength.models import CharacterClasses

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS    = string.digits
SYMBOLS   = "!@#$%^&*()-_=+[]{};:'\"\\|,.<>/?`~"

# Characters that are easy to misread in most fonts
AMBIGUOUS = frozenset('O0l1I')

CLASS_SIZES = {
    'lowercase': len(LOWERCASE),
    'uppercase': len(UPPERCASE),
    'digits':    len(DIGITS),
    'symbols':   len(SYMBOLS),
}


def detect_classes(password: str) -> CharacterClasses:
    """Report which of the four classes appear. Anything non-alphanumeric is a symbol."""
    return CharacterClasses(
        has_lowercase=any(c in LOWERCASE for c in password),
        has_uppercase=any(c in UPPERCASE for c in password),
        has_digits=any(c in DIGITS for c in password),
        has_symbols=any(c not in LOWERCASE and c not in UPPERCASE and c not in DIGITS
                        for c in password),
    )


def character_set_size(classes: CharacterClasses) -> int:
    """Sum of the cardinalities of the classes that are present."""
    return ((CLASS_SIZES['lowercase'] if classes.has_lowercase else 0)
            + (CLASS_SIZES['uppercase'] if classes.has_uppercase else 0)
            + (CLASS_SIZES['digits'] if classes.has_digits else 0)
            + (CLASS_SIZES['symbols'] if classes.has_symbols else 0))


def strip_ambiguous(alphabet: str) -> str:
    return ''.join(c for c in alphabet if c not in AMBIGUOUS)
