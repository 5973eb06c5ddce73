"""
generator.py — constrained random password generation.

How it works

1) Validate the options. Nothing random happens before this passes.
2) Build one alphabet per selected class (minus ambiguous characters if asked).
3) Optionally seed one character from each selected class.
4) Fill the rest from the combined alphabet, redrawing immediate repeats
   when ``no_repeats`` is set.
5) Fisher-Yates shuffle the whole buffer so seeds land anywhere.
"""
import logging
from typing import List, Optional, Tuple

from pwstrength import charsets
from pwstrength.errors import GenerationError, ValidationError
from pwstrength.models import GeneratorOptions
from pwstrength.randomness import RandomSource, choice, default_source, shuffle

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
MAX_LENGTH = 64

# Redraws allowed for a single position under no_repeats. With at least two
# symbols in the alphabet, hitting this by chance is practically impossible.
MAX_REDRAWS = 1000


def validate_options(options: GeneratorOptions) -> None:
    length = options.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValidationError('Length must be a whole number.')
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise ValidationError(f'Length must be between {MIN_LENGTH} and {MAX_LENGTH} characters.')
    if options.selected_count == 0:
        raise ValidationError('Select at least one character category.')
    if options.require_each_selected_type and options.selected_count > length:
        raise ValidationError('Length is too short to include every selected category.')
    if options.no_repeats and len(build_pool(options)) < 2:
        raise ValidationError('Avoiding repeats needs at least two distinct characters.')


def class_alphabets(options: GeneratorOptions) -> List[str]:
    """Alphabets of the selected classes, in lower/upper/digit/symbol order."""
    selected = (
        (options.include_lowercase, charsets.LOWERCASE),
        (options.include_uppercase, charsets.UPPERCASE),
        (options.include_digits, charsets.DIGITS),
        (options.include_symbols, charsets.SYMBOLS),
    )
    alphabets = [chars for enabled, chars in selected if enabled]
    if options.exclude_ambiguous:
        alphabets = [charsets.strip_ambiguous(chars) for chars in alphabets]
    return alphabets


def build_pool(options: GeneratorOptions) -> str:
    return ''.join(class_alphabets(options))


def _draw(pool: str, previous: Optional[str], no_repeats: bool, source: RandomSource) -> str:
    for _ in range(MAX_REDRAWS):
        char = choice(pool, source)
        if not (no_repeats and char == previous):
            return char
    raise GenerationError(
        f'Could not avoid a repeated character after {MAX_REDRAWS} draws; '
        'the random source looks degenerate.'
    )


def generate_password(options: GeneratorOptions, source: Optional[RandomSource] = None) -> str:
    validate_options(options)
    source = source or default_source()

    alphabets = class_alphabets(options)
    pool = ''.join(alphabets)
    logger.debug(f"generating: length={options.length} classes={len(alphabets)} pool={len(pool)}")

    chars: List[str] = []
    if options.require_each_selected_type:
        chars.extend(choice(alphabet, source) for alphabet in alphabets)

    while len(chars) < options.length:
        previous = chars[-1] if chars else None
        chars.append(_draw(pool, previous, options.no_repeats, source))

    return ''.join(shuffle(chars, source))


def generate_passwords(options: GeneratorOptions, count: int,
                       source: Optional[RandomSource] = None) -> Tuple[str, ...]:
    if count < 1:
        raise ValidationError('Count must be at least 1.')
    validate_options(options)
    return tuple(generate_password(options, source) for _ in range(count))
