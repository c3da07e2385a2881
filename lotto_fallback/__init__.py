"""Offline lottery number generator used when the remote prediction service is unavailable."""

__version__ = '0.3.0'

from .models import GameRules, PredictionRequest, FrequencyProfile, PredictionResult
from .utils.exceptions import PredictionError, InsufficientPoolError, StrategyError
from .scripts.analyze_data import analyze
from .scripts.predictions import generate, predict_locally
from .scripts.games import get_game_rules

__all__ = [
    'GameRules',
    'PredictionRequest',
    'FrequencyProfile',
    'PredictionResult',
    'PredictionError',
    'InsufficientPoolError',
    'StrategyError',
    'analyze',
    'generate',
    'predict_locally',
    'get_game_rules',
]
