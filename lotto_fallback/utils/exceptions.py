"""Errors raised by the offline predictor."""


class PredictionError(ValueError):
    """Base class for errors raised while generating a prediction."""


class InsufficientPoolError(PredictionError):
    """Raised when exclusions leave too few numbers to fill an entry."""

    def __init__(self, eligible: int, required: int, main_range: int):
        self.eligible = eligible
        self.required = required
        self.main_range = main_range
        super().__init__(
            f"Only {eligible} of {main_range} numbers remain after exclusions, "
            f"but {required} are needed per entry"
        )


class StrategyError(RuntimeError):
    """Raised when a prediction strategy cannot produce a result."""
