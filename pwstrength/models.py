from dataclasses import dataclass, field, asdict
from typing import Any, Mapping, Optional, Tuple

from pwstrength.errors import ValidationError


# ── Analysis values ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CharacterClasses:
    has_lowercase: bool = False
    has_uppercase: bool = False
    has_digits:    bool = False
    has_symbols:   bool = False


@dataclass(frozen=True)
class PatternFinding:
    kind:         str
    message:      str
    penalty_bits: float
    match:        Optional[str] = None


@dataclass(frozen=True)
class CrackScenario:
    id:                 str
    label:              str
    guesses_per_second: float
    time_seconds:       float
    formatted_time:     str


@dataclass(frozen=True)
class CrackTimes:
    offline_fast:   CrackScenario
    offline_medium: CrackScenario
    online_limited: CrackScenario

    def __iter__(self):
        return iter((self.offline_fast, self.offline_medium, self.online_limited))


@dataclass(frozen=True)
class Suggestion:
    message:     str
    impact_bits: int

    def __str__(self) -> str:
        return f'{self.message} (estimated impact +{self.impact_bits} bits)'


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis call. Never holds the analysed password."""
    length:                 int
    categories:             CharacterClasses
    character_set_size:     int
    unique_char_count:      int
    diversity_ratio:        float
    raw_entropy_bits:       float
    penalties_bits:         float
    effective_entropy_bits: float
    score:                  int
    strength_label:         str
    detected_patterns:      Tuple[PatternFinding, ...]
    crack_times:            CrackTimes
    suggestions:            Tuple[Suggestion, ...]
    notes:                  Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['detected_patterns'] = [asdict(p) for p in self.detected_patterns]
        data['suggestions'] = [str(s) for s in self.suggestions]
        data['notes'] = list(self.notes)
        return data


# ── Generator options ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class GeneratorOptions:
    length:                     int  = 16
    include_lowercase:          bool = True
    include_uppercase:          bool = True
    include_digits:             bool = True
    include_symbols:            bool = True
    exclude_ambiguous:          bool = False
    no_repeats:                 bool = False
    require_each_selected_type: bool = False

    @property
    def selected_count(self) -> int:
        return sum((self.include_lowercase, self.include_uppercase,
                    self.include_digits, self.include_symbols))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'GeneratorOptions':
        """Build options from a decoded JSON body, rejecting wrong types."""
        if not isinstance(data, Mapping):
            raise ValidationError('Generator options must be an object.')

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValidationError(f"Unknown option(s): {', '.join(sorted(unknown))}.")

        kwargs = {}
        for name, f in cls.__dataclass_fields__.items():
            if name not in data or data[name] is None:
                continue
            value = data[name]
            if f.type in (int, 'int'):
                # bool is an int subclass; reject it explicitly
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValidationError(f'{name} must be an integer.')
            elif not isinstance(value, bool):
                raise ValidationError(f'{name} must be true or false.')
            kwargs[name] = value
        return cls(**kwargs)
