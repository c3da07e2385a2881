"""Frequency profiles and prediction results."""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any


@dataclass
class FrequencyProfile:
    """
    Occurrence counts for every number of a game's main range.

    Attributes:
        counts: Mapping number -> occurrences, one key per number in [1, main_range]
        hot: Up to 10 most frequent numbers, most frequent first
        cold: Up to 10 least frequent numbers, taken from the tail of the same ordering
        total_tokens: Number of in-range tokens that were counted
    """
    counts: Dict[int, int]
    hot: List[int] = field(default_factory=list)
    cold: List[int] = field(default_factory=list)
    total_tokens: int = 0

    @property
    def main_range(self) -> int:
        return len(self.counts)

    @property
    def is_empty(self) -> bool:
        """True when the history contained no usable numbers."""
        return self.total_tokens == 0


@dataclass
class PredictionResult:
    """
    Output of the local selector.

    confidence_score is a cosmetic figure drawn at random from a fixed range.
    It is not a statistical confidence and must not be presented as one.
    """
    entries: List[List[int]]
    narrative: str
    method_tags: List[str]
    confidence_score: int
    bonus_numbers: Optional[List[int]] = None
    system_label: str = 'Standard'
    suggested_numbers: List[int] = field(default_factory=list)
    source: str = 'local-fallback'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain JSON-serialisable types."""
        return asdict(self)
