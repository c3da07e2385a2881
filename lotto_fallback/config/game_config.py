"""
Configuration file for the offline lottery predictor.
Holds the built-in game catalog and the tunable constants of the local selector.
"""

# Name of the game used when a requested game is unknown
DEFAULT_GAME = 'Custom Game'

# Built-in game catalog
# bonus_range set = two-barrel game, missing = same-barrel supplementary
GAME_CONFIGS = {
    # USA
    'USA Power Lotto': {
        'main_count': 5,
        'main_range': 69,
        'bonus_count': 1,
        'bonus_range': 26,
        'description': 'Pick 5 (1-69) + PB (1-26)',
        'region': 'USA',
    },
    'USA Mega Lotto': {
        'main_count': 5,
        'main_range': 70,
        'bonus_count': 1,
        'bonus_range': 25,
        'description': 'Pick 5 (1-70) + Mega (1-25)',
        'region': 'USA',
    },

    # Europe
    'European Millions': {
        'main_count': 5,
        'main_range': 50,
        'bonus_count': 2,
        'bonus_range': 12,
        'description': 'Pick 5 (1-50) + Stars (1-12)',
        'region': 'Europe',
    },
    'European Jackpot': {
        'main_count': 5,
        'main_range': 50,
        'bonus_count': 2,
        'bonus_range': 12,
        'description': 'Pick 5 (1-50) + EuroNums (1-12)',
        'region': 'Europe',
    },
    'Italian Super Jackpot': {
        'main_count': 6,
        'main_range': 90,
        'bonus_count': 1,
        'description': 'Pick 6 (1-90)',
        'region': 'Europe',
    },
    'UK Lotto': {
        'main_count': 6,
        'main_range': 59,
        'bonus_count': 1,
        'description': 'Pick 6 (1-59)',
        'region': 'Europe',
    },
    'Irish Lotto': {
        'main_count': 6,
        'main_range': 47,
        'bonus_count': 1,
        'description': 'Pick 6 (1-47)',
        'region': 'Europe',
    },
    'La Primitiva': {
        'main_count': 6,
        'main_range': 49,
        'bonus_count': 1,
        'bonus_range': 9,
        'description': 'Pick 6 (1-49) + Reintegro (0-9)',
        'region': 'Europe',
    },

    # Custom
    'Custom Game': {
        'main_count': 6,
        'main_range': 45,
        'bonus_count': 0,
        'description': 'User-defined parameters',
        'region': 'Global',
    },
}

# Local selector parameters
# The probability thresholds are cumulative: r < hot -> hot pool,
# r < cold -> cold pool, otherwise uniform over the whole range.
# None of these values carry statistical meaning.
SELECTION_CONFIG = {
    'hot_pool_size': 10,
    'cold_pool_size': 10,
    'hot_threshold': 0.40,
    'cold_threshold': 0.60,
    'narrative_hot_count': 5,
    'narrative_cold_count': 5,
}

# Cosmetic confidence figure shown with every local result (inclusive bounds)
CONFIDENCE_RANGE = (75, 92)

# Labels attached to every local result
METHOD_TAGS = (
    'Frequency Analysis',
    'Randomized Sampling',
    'Exclusion Filtering',
)

# Identifies results produced by the local fallback
LOCAL_SOURCE = 'local-fallback'

# Message shown to end users when the local selector cannot fill an entry
USER_ERROR_MESSAGE = 'Unable to generate numbers with current filters.'
