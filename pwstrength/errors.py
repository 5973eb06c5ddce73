"""
errors.py — exception types raised by the analyzer, the generator and the
randomness adapter.
"""


class PasswordToolError(Exception):
    """Base class for every error raised by pwstrength."""


class ValidationError(PasswordToolError, ValueError):
    """Caller input was rejected. The message is safe to show to a user."""


class RandomnessUnavailable(PasswordToolError, RuntimeError):
    """The platform offers no cryptographically secure random source."""


class GenerationError(PasswordToolError, RuntimeError):
    """Sampling could not complete (e.g. the no-repeat redraw cap was hit)."""
