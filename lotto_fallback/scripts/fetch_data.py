"""Loading and generating draw history text."""

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..models.game import GameRules

logger = logging.getLogger(__name__)


def load_history(path: Union[str, Path]) -> str:
    """
    Read draw history from a text file.

    Bytes that are not valid UTF-8 are replaced; only digit runs matter to the
    analyzer.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the path cannot be read (a directory, for example)
    """
    path = Path(path)
    logger.info(f"Loading history from {path}")
    if not path.exists():
        logger.error(f"History file not found: {path}")
        raise FileNotFoundError(f"History file not found: {path}")

    text = path.read_text(encoding='utf-8', errors='replace')
    logger.info(f"Loaded {len(text.splitlines())} lines of history")
    return text


def generate_demo_history(rules: GameRules,
                          draws: int = 5,
                          rng: Optional[np.random.Generator] = None,
                          today: Optional[date] = None) -> str:
    """
    Generate placeholder weekly draws for trying the tool without real data.

    Numbers are drawn uniformly and may repeat within a line.
    """
    rng = rng if rng is not None else np.random.default_rng()
    today = today or date.today()

    lines = []
    for i in range(draws):
        draw_date = today - timedelta(days=(i + 1) * 7)
        main = sorted(int(n) for n in rng.integers(1, rules.main_range + 1, size=rules.main_count))
        line = f"Draw {draw_date.isoformat()}: {', '.join(map(str, main))}"

        if rules.has_bonus:
            bonus_range = rules.bonus_range or rules.main_range
            bonus = ', '.join(str(int(n)) for n in rng.integers(1, bonus_range + 1, size=rules.bonus_count))
            line += f" (+ {bonus})" if rules.separate_barrel else f" (Supp: {bonus})"

        lines.append(line)

    return '\n'.join(lines)
