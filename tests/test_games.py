import unittest
import os
import sys

# Add project root to path to resolve imports
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(__file__))))

from lotto_fallback.config.game_config import GAME_CONFIGS, DEFAULT_GAME
from lotto_fallback.scripts.games import get_game_rules, list_games, is_separate_barrel


class TestGameCatalog(unittest.TestCase):
    def test_list_games(self):
        games = list_games()
        self.assertEqual(len(games), 9)
        self.assertIn('USA Power Lotto', games)
        self.assertIn(DEFAULT_GAME, games)

    def test_every_catalog_entry_is_valid(self):
        for name in GAME_CONFIGS:
            rules = get_game_rules(name)
            self.assertEqual(rules.name, name)
            self.assertLessEqual(rules.main_count, rules.main_range)

    def test_two_barrel_games(self):
        for name in ('USA Power Lotto', 'USA Mega Lotto', 'European Millions',
                     'European Jackpot', 'La Primitiva'):
            self.assertTrue(get_game_rules(name).separate_barrel, name)

    def test_same_barrel_games(self):
        for name in ('Italian Super Jackpot', 'UK Lotto', 'Irish Lotto'):
            rules = get_game_rules(name)
            self.assertTrue(rules.has_bonus)
            self.assertFalse(rules.separate_barrel, name)

    def test_is_separate_barrel(self):
        self.assertTrue(is_separate_barrel(get_game_rules('USA Power Lotto')))
        self.assertFalse(is_separate_barrel(get_game_rules('UK Lotto')))
        self.assertFalse(is_separate_barrel(get_game_rules(DEFAULT_GAME)))

    def test_none_overrides_keep_catalog_values(self):
        rules = get_game_rules('USA Power Lotto', bonus_range=None, main_count=None)
        self.assertEqual(rules.bonus_range, 26)
        self.assertEqual(rules.main_count, 5)
        # Clearing the bonus barrel goes through the rules themselves
        self.assertFalse(rules.with_overrides(bonus_range=None).separate_barrel)

    def test_powerball_rules(self):
        rules = get_game_rules('USA Power Lotto')
        self.assertEqual((rules.main_count, rules.main_range), (5, 69))
        self.assertEqual((rules.bonus_count, rules.bonus_range), (1, 26))

    def test_unknown_game_falls_back_to_custom(self):
        rules = get_game_rules('Moon Lotto')
        self.assertEqual(rules.name, DEFAULT_GAME)
        self.assertEqual((rules.main_count, rules.main_range, rules.bonus_count), (6, 45, 0))

    def test_custom_overrides(self):
        rules = get_game_rules(DEFAULT_GAME, main_count=7, main_range=35, bonus_count=None)
        self.assertEqual((rules.main_count, rules.main_range), (7, 35))
        self.assertEqual(rules.bonus_count, 0)
        # Catalog entries are not modified
        self.assertEqual(GAME_CONFIGS[DEFAULT_GAME]['main_count'], 6)

    def test_invalid_overrides_rejected(self):
        with self.assertRaises(ValueError):
            get_game_rules(DEFAULT_GAME, main_count=50, main_range=10)


if __name__ == '__main__':
    unittest.main()
