"""Frequency analysis, local selection and the fallback chain."""

from .analyze_data import analyze, extract_numbers, frequency_table, visualize_frequency
from .predictions import generate, predict_locally, save_predictions
from .fallback import PredictionStrategy, LocalFallbackStrategy, FallbackChain, default_chain
from .fetch_data import load_history, generate_demo_history
from .games import get_game_rules, list_games, is_separate_barrel

__all__ = [
    'analyze',
    'extract_numbers',
    'frequency_table',
    'visualize_frequency',
    'generate',
    'predict_locally',
    'save_predictions',
    'PredictionStrategy',
    'LocalFallbackStrategy',
    'FallbackChain',
    'default_chain',
    'load_history',
    'generate_demo_history',
    'get_game_rules',
    'list_games',
    'is_separate_barrel',
]
