"""Frequency analysis of free-form draw history."""

import logging
import re
from collections import Counter
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from ..config.game_config import SELECTION_CONFIG
from ..models.prediction import FrequencyProfile

logger = logging.getLogger(__name__)

# Maximal runs of ASCII digits; str.isdigit would also accept other scripts
DIGIT_RUN = re.compile(r'[0-9]+')


def extract_numbers(history_text: Optional[str], max_value: Optional[int] = None) -> List[int]:
    """
    Extract every integer token from free-form text.

    Dates, draw labels and bonus annotations are not told apart from draw
    numbers: every maximal run of digits is one token.

    Args:
        history_text: Raw history text, may be empty or None
        max_value: If given, tokens longer than this value's digit count are
            skipped without converting them

    Returns:
        List of integers in order of appearance
    """
    if not history_text:
        return []

    max_digits = len(str(max_value)) if max_value is not None else None
    numbers = []
    for token in DIGIT_RUN.findall(history_text):
        significant = token.lstrip('0') or '0'
        # Long runs (e.g. pasted ids) can never be in range
        if max_digits is not None and len(significant) > max_digits:
            continue
        numbers.append(int(significant))
    return numbers


def rank_numbers(counts: dict) -> List[int]:
    """Order numbers by count, most frequent first, ascending number on ties."""
    # sorted() is stable and counts is built in ascending key order
    return sorted(counts, key=lambda n: counts[n], reverse=True)


def analyze(history_text: Optional[str], main_range: int) -> FrequencyProfile:
    """
    Count how often each number of the main range appears in the history.

    Args:
        history_text: Free-form draw history
        main_range: Largest valid main number

    Returns:
        FrequencyProfile with per-number counts and the hot/cold pools
    """
    if main_range < 1:
        logger.warning(f"main_range {main_range} is empty, returning an empty profile")
        return FrequencyProfile(counts={})

    counts = {n: 0 for n in range(1, main_range + 1)}
    tokens = [n for n in extract_numbers(history_text, main_range) if 1 <= n <= main_range]
    for number, occurrences in Counter(tokens).items():
        counts[number] += occurrences

    ranked = rank_numbers(counts)
    hot = ranked[:SELECTION_CONFIG['hot_pool_size']]
    cold = ranked[-SELECTION_CONFIG['cold_pool_size']:]

    if tokens:
        logger.info(f"Analyzed {len(tokens)} numbers from history. Hot numbers: {hot}")
    else:
        logger.info("No usable numbers in history, hot/cold pools follow numeric order")

    return FrequencyProfile(counts=counts, hot=hot, cold=cold, total_tokens=len(tokens))


def frequency_table(profile: FrequencyProfile) -> pd.DataFrame:
    """
    Tabulate a frequency profile.

    Returns:
        DataFrame with columns number, count, share and status, ordered by number
    """
    numbers = np.array(list(profile.counts.keys()), dtype=int)
    counts = np.array(list(profile.counts.values()), dtype=int)
    total = counts.sum()
    share = counts / total if total > 0 else np.zeros(len(counts))

    hot = set(profile.hot)
    cold = set(profile.cold)

    def status(n):
        if n in hot and n in cold:
            return 'hot+cold'
        if n in hot:
            return 'hot'
        if n in cold:
            return 'cold'
        return 'neutral'

    return pd.DataFrame({
        'number': numbers,
        'count': counts,
        'share': share,
        'status': [status(int(n)) for n in numbers],
    })


def visualize_frequency(profile: FrequencyProfile, output_path: Union[str, Path]) -> Path:
    """Save a bar chart of the profile with hot and cold numbers highlighted."""
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt
    from matplotlib.patches import Patch

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    table = frequency_table(profile)
    palette = {'hot': 'firebrick', 'cold': 'steelblue', 'hot+cold': 'purple', 'neutral': 'lightgray'}
    colors = [palette[s] for s in table['status']]

    fig, ax = plt.subplots(figsize=(15, 6))
    ax.bar(table['number'], table['count'], color=colors)
    ax.set_title('Number Frequency in History', fontsize=14)
    ax.set_xlabel('Lottery Number', fontsize=12)
    ax.set_ylabel('Occurrences', fontsize=12)
    ax.grid(axis='y', alpha=0.3)
    ax.legend(handles=[Patch(color=palette['hot'], label='Hot'),
                       Patch(color=palette['cold'], label='Cold')])

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info(f"Saved frequency chart to {output_path}")
    return output_path
