"""Configuration for the offline lottery predictor."""

from .game_config import (
    DEFAULT_GAME,
    GAME_CONFIGS,
    SELECTION_CONFIG,
    CONFIDENCE_RANGE,
    METHOD_TAGS,
    LOCAL_SOURCE,
    USER_ERROR_MESSAGE,
)

__all__ = [
    'DEFAULT_GAME',
    'GAME_CONFIGS',
    'SELECTION_CONFIG',
    'CONFIDENCE_RANGE',
    'METHOD_TAGS',
    'LOCAL_SOURCE',
    'USER_ERROR_MESSAGE',
]
