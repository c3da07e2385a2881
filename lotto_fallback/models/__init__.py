"""Data models for the offline lottery predictor."""

from .game import GameRules, PredictionRequest
from .prediction import FrequencyProfile, PredictionResult

__all__ = [
    'GameRules',
    'PredictionRequest',
    'FrequencyProfile',
    'PredictionResult',
]
