"""Ordered prediction strategies that fall through to the local selector."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..models.game import GameRules, PredictionRequest
from ..models.prediction import PredictionResult
from ..utils.exceptions import PredictionError, StrategyError
from .predictions import predict_locally

logger = logging.getLogger(__name__)


class PredictionStrategy(ABC):
    """A single way of producing a prediction, such as a remote service or the local selector."""

    name = 'strategy'

    @abstractmethod
    def attempt(self, rules: GameRules, history_text: str, request: PredictionRequest) -> PredictionResult:
        """Produce a result or raise StrategyError."""
        pass


class LocalFallbackStrategy(PredictionStrategy):
    """Frequency analysis plus randomized selection, computed in-process."""

    name = 'local'

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng
        self.seed = seed

    def attempt(self, rules, history_text, request):
        return predict_locally(rules, history_text, request, rng=self.rng, seed=self.seed)


class FallbackChain:
    """
    Try strategies in order until one succeeds.

    A strategy that fails is logged and skipped. PredictionError is not a
    strategy failure: it describes unusable input and is re-raised, since
    every later strategy would reject the same request.
    """

    def __init__(self, strategies: Sequence[PredictionStrategy]):
        if not strategies:
            raise ValueError("FallbackChain needs at least one strategy")
        self.strategies = list(strategies)

    def predict(self, rules: GameRules, history_text: str,
                request: PredictionRequest) -> Tuple[str, PredictionResult]:
        """
        Returns:
            Name of the strategy that succeeded and its result

        Raises:
            PredictionError: If the request cannot be satisfied
            StrategyError: If every strategy failed
        """
        last_error = None
        for strategy in self.strategies:
            try:
                result = strategy.attempt(rules, history_text, request)
            except PredictionError:
                raise
            except Exception as e:
                logger.warning(f"Strategy '{strategy.name}' failed: {e}")
                last_error = e
                continue
            logger.info(f"Prediction produced by strategy '{strategy.name}'")
            return strategy.name, result

        raise StrategyError(f"All {len(self.strategies)} strategies failed") from last_error


def default_chain(*remote: PredictionStrategy,
                  rng: Optional[np.random.Generator] = None,
                  seed: Optional[int] = None) -> FallbackChain:
    """Build a chain of the given strategies followed by the local fallback."""
    strategies: List[PredictionStrategy] = list(remote)
    strategies.append(LocalFallbackStrategy(rng=rng, seed=seed))
    return FallbackChain(strategies)
