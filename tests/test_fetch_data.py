import os
import re
import sys
from datetime import date

import numpy as np
import pytest

# Add project root to path to resolve imports
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(__file__))))

from lotto_fallback.models.game import GameRules
from lotto_fallback.scripts.analyze_data import analyze
from lotto_fallback.scripts.fetch_data import load_history, generate_demo_history

LINE = re.compile(r'^Draw (\d{4}-\d{2}-\d{2}): ([\d, ]+?)(?: \((\+|Supp:) ([\d, ]+)\))?$')


def test_load_history(tmp_path):
    path = tmp_path / 'draws.txt'
    path.write_text("Draw 1: 1, 2, 3\nDraw 2: 4, 5, 6\n", encoding='utf-8')
    assert load_history(path) == "Draw 1: 1, 2, 3\nDraw 2: 4, 5, 6\n"
    assert load_history(str(path)).startswith("Draw 1")


def test_load_history_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / 'draws.txt'
    path.write_bytes(b"Draw: 1, 7, \xff\xfe 13\n")
    text = load_history(path)
    assert '\ufffd' in text
    assert analyze(text, 45).total_tokens == 3


def test_load_history_directory(tmp_path):
    with pytest.raises(OSError):
        load_history(tmp_path)


def test_load_history_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_history(tmp_path / 'missing.txt')


def test_demo_history_two_barrel():
    rules = GameRules(main_count=5, main_range=69, bonus_count=1, bonus_range=26)
    text = generate_demo_history(rules, rng=np.random.default_rng(0), today=date(2024, 3, 9))
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("Draw 2024-03-02:")
    assert lines[4].startswith("Draw 2024-02-03:")

    for line in lines:
        match = LINE.match(line)
        assert match, line
        main = [int(n) for n in match.group(2).split(', ')]
        assert len(main) == 5
        assert main == sorted(main)
        assert all(1 <= n <= 69 for n in main)
        assert match.group(3) == '+'
        assert 1 <= int(match.group(4)) <= 26


def test_demo_history_same_barrel():
    rules = GameRules(main_count=6, main_range=59, bonus_count=1)
    text = generate_demo_history(rules, draws=3, rng=np.random.default_rng(1))
    lines = text.splitlines()
    assert len(lines) == 3
    assert all("(Supp: " in line for line in lines)


def test_demo_history_without_bonus():
    rules = GameRules(main_count=6, main_range=45)
    text = generate_demo_history(rules, rng=np.random.default_rng(2))
    assert "(" not in text


def test_demo_history_feeds_analyzer():
    rules = GameRules(main_count=6, main_range=45)
    profile = analyze(generate_demo_history(rules, rng=np.random.default_rng(3)), 45)
    assert profile.total_tokens > 0
