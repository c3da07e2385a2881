"""Lookup of built-in lottery games."""

import logging
from typing import List

from ..config.game_config import GAME_CONFIGS, DEFAULT_GAME
from ..models.game import GameRules

logger = logging.getLogger(__name__)


def list_games() -> List[str]:
    return list(GAME_CONFIGS.keys())


def get_game_rules(name: str = DEFAULT_GAME, **overrides) -> GameRules:
    """
    Build the rules for a named game.

    Unknown names fall back to the custom game. Keyword overrides (main_count,
    main_range, bonus_count, bonus_range) replace catalog values; None values
    are ignored so unset command line options leave the catalog alone. To clear
    bonus_range, call GameRules.with_overrides on the result.

    Raises:
        ValueError: If the resulting rules are invalid
    """
    config = GAME_CONFIGS.get(name)
    if config is None:
        logger.warning(f"Unknown game '{name}', using '{DEFAULT_GAME}' rules")
        name = DEFAULT_GAME
        config = GAME_CONFIGS[DEFAULT_GAME]

    rules = GameRules(name=name, **config)
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        rules = rules.with_overrides(**overrides)
        logger.info(f"Custom parameters for {name}: {rules.main_count}/{rules.main_range}, "
                    f"bonus {rules.bonus_count}/{rules.bonus_range}")
    return rules


def is_separate_barrel(rules: GameRules) -> bool:
    """True when bonus numbers come from their own barrel, as in Powerball."""
    return rules.separate_barrel
