from typing import Optional

from pwstrength.analyzer import analyze_password
from pwstrength.crack_time import estimate_crack_times
from pwstrength.errors import ValidationError
from pwstrength.generator import generate_password
from pwstrength.models import AnalysisResult, CrackTimes, GeneratorOptions
from pwstrength.randomness import RandomSource


def analyze(password: str, max_length: Optional[int] = None) -> AnalysisResult:
    """Analyse a caller-supplied password. Empty input and inputs over ``max_length`` are rejected."""
    if not isinstance(password, str):
        raise ValidationError('Password must be a string.')
    if not password:
        raise ValidationError('Password is required.')
    if max_length is not None and len(password) > max_length:
        raise ValidationError(f'Password is too long (max {max_length} characters).')
    return analyze_password(password)


def generate(options: GeneratorOptions, source: Optional[RandomSource] = None) -> str:
    """Generate a password from the OS CSPRNG (or ``source`` when given)."""
    return generate_password(options, source)


def analyze_crack_times(effective_entropy_bits: float) -> CrackTimes:
    """Crack-time estimates for an entropy figure computed elsewhere."""
    return estimate_crack_times(effective_entropy_bits)


def generate_with_analysis(options: GeneratorOptions,
                           source: Optional[RandomSource] = None) -> dict:
    password = generate(options, source)
    return {'password': password, 'analysis': analyze_password(password)}
