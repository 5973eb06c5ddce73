"""
Bounded history of analysis summaries.

Only figures derived from an analysis are kept (length, score, label,
entropy, fastest crack time); the password itself never enters here.
"""
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import List, Optional

from pwstrength.models import AnalysisResult

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class HistoryEntry:
    date:                   str
    length:                 int
    score:                  int
    label:                  str
    effective_entropy_bits: float
    offline_fast_time:      str

    @classmethod
    def from_analysis(cls, analysis: AnalysisResult,
                      now: Optional[datetime] = None) -> 'HistoryEntry':
        now = now or datetime.now(timezone.utc)
        return cls(
            date=now.isoformat(),
            length=analysis.length,
            score=analysis.score,
            label=analysis.strength_label,
            effective_entropy_bits=round(analysis.effective_entropy_bits, 1),
            offline_fast_time=analysis.crack_times.offline_fast.formatted_time,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def remember(history: List[dict], entry: HistoryEntry, limit: int = DEFAULT_LIMIT) -> List[dict]:
    """Return a new list with ``entry`` first, dropping the oldest past ``limit``."""
    if limit < 1:
        return []
    return [entry.to_dict()] + list(history or [])[:limit - 1]
