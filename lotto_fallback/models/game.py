"""Game rules and prediction requests."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from ..utils.validation import require_int, unique_numbers


@dataclass(frozen=True)
class GameRules:
    """
    Structural rules of a lottery game.

    Primary numbers are drawn from [1, main_range]. When bonus_range is set the
    bonus numbers come from a separate barrel [1, bonus_range]; otherwise they are
    supplementary numbers drawn from the main barrel.
    """
    main_count: int
    main_range: int
    bonus_count: int = 0
    bonus_range: Optional[int] = None
    name: str = 'Custom Game'
    description: str = ''
    region: str = ''

    def __post_init__(self):
        require_int(self.main_count, 'main_count', minimum=1)
        require_int(self.main_range, 'main_range', minimum=1)
        require_int(self.bonus_count, 'bonus_count', minimum=0)
        if self.bonus_range is not None:
            require_int(self.bonus_range, 'bonus_range', minimum=1)
        if self.main_count > self.main_range:
            raise ValueError(
                f"main_count ({self.main_count}) cannot exceed main_range ({self.main_range})"
            )

    @property
    def has_bonus(self) -> bool:
        return self.bonus_count > 0

    @property
    def separate_barrel(self) -> bool:
        """True for two-barrel games such as Powerball."""
        return self.has_bonus and self.bonus_range is not None

    def with_overrides(self, **overrides) -> 'GameRules':
        """
        Return a new validated instance with some fields replaced.

        Every given field is applied, None included: bonus_range=None turns a
        two-barrel game into a same-barrel one.
        """
        return replace(self, **overrides)


@dataclass(frozen=True)
class PredictionRequest:
    """User input for a single prediction request."""
    entry_count: int = 1
    lucky_numbers: Tuple[int, ...] = field(default_factory=tuple)
    unwanted_numbers: frozenset = field(default_factory=frozenset)
    system_number: Optional[int] = None

    def __post_init__(self):
        require_int(self.entry_count, 'entry_count', minimum=1)
        if self.system_number is not None:
            require_int(self.system_number, 'system_number', minimum=1)
        # Normalise collections so callers may pass lists or sets
        object.__setattr__(self, 'lucky_numbers',
                           tuple(unique_numbers(self.lucky_numbers, 'lucky_numbers')))
        object.__setattr__(self, 'unwanted_numbers',
                           frozenset(unique_numbers(self.unwanted_numbers, 'unwanted_numbers')))

    def target_size(self, rules: GameRules) -> int:
        """Numbers per entry: the system size when given, otherwise the game's count."""
        return self.system_number if self.system_number is not None else rules.main_count

    def is_system(self, rules: GameRules) -> bool:
        return self.system_number is not None and self.system_number > rules.main_count

    def system_label(self, rules: GameRules) -> str:
        return f"System {self.system_number}" if self.is_system(rules) else 'Standard'
