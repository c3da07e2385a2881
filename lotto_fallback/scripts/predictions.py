"""
Local prediction fallback.

Generates entries from a frequency profile when the remote prediction service
cannot be reached. Draws favour the hot and cold pools but remain random; the
output has no predictive value and the narrative says so.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config.game_config import (
    SELECTION_CONFIG,
    CONFIDENCE_RANGE,
    METHOD_TAGS,
    LOCAL_SOURCE,
)
from ..models.game import GameRules, PredictionRequest
from ..models.prediction import FrequencyProfile, PredictionResult
from ..utils.exceptions import InsufficientPoolError
from ..utils.validation import validate_entry
from .analyze_data import analyze

logger = logging.getLogger(__name__)


def make_rng(rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> np.random.Generator:
    """Return the given generator, or a new one seeded with seed."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def eligible_numbers(rules: GameRules, unwanted) -> int:
    """Count of main numbers left after removing unwanted ones."""
    excluded = sum(1 for n in set(unwanted) if 1 <= n <= rules.main_range)
    return rules.main_range - excluded


def check_pool(rules: GameRules, request: PredictionRequest) -> int:
    """
    Verify exclusions leave enough numbers to fill every entry.

    Same-barrel games also need one number left over for the supplementary draw.

    Returns:
        Target entry size

    Raises:
        InsufficientPoolError: If the pool is too small
    """
    target = request.target_size(rules)
    required = target + 1 if rules.has_bonus and not rules.separate_barrel else target
    eligible = eligible_numbers(rules, request.unwanted_numbers)
    if eligible < required:
        logger.error(f"Cannot fill {required} numbers from {eligible} eligible "
                     f"({len(request.unwanted_numbers)} excluded)")
        raise InsufficientPoolError(eligible, required, rules.main_range)
    return target


def usable_lucky_numbers(rules: GameRules, request: PredictionRequest) -> List[int]:
    """Lucky numbers that are in range and not excluded, capped at the entry size."""
    usable = [n for n in request.lucky_numbers
              if 1 <= n <= rules.main_range and n not in request.unwanted_numbers]
    return usable[:request.target_size(rules)]


def draw_candidate(rng: np.random.Generator, hot: Sequence[int], cold: Sequence[int], main_range: int) -> int:
    r = rng.random()
    if r < SELECTION_CONFIG['hot_threshold'] and len(hot) > 0:
        return int(hot[rng.integers(len(hot))])
    if r < SELECTION_CONFIG['cold_threshold'] and len(cold) > 0:
        return int(cold[rng.integers(len(cold))])
    return int(rng.integers(1, main_range + 1))


def fill_entry(rules: GameRules,
               profile: FrequencyProfile,
               request: PredictionRequest,
               lucky: Sequence[int],
               target: int,
               rng: np.random.Generator) -> List[int]:
    """Fill one entry up to the target size and return it sorted. Termination relies on check_pool."""
    chosen = set(lucky)
    unwanted = request.unwanted_numbers
    while len(chosen) < target:
        candidate = draw_candidate(rng, profile.hot, profile.cold, rules.main_range)
        if candidate in unwanted or candidate in chosen:
            continue
        if not 1 <= candidate <= rules.main_range:
            continue
        chosen.add(candidate)
    return validate_entry(chosen, target, 1, rules.main_range, excluded=unwanted)


def draw_bonus(rules: GameRules, entry: Sequence[int], unwanted, rng: np.random.Generator) -> int:
    """
    Draw one bonus number for an entry.

    Two-barrel games draw from [1, bonus_range] with no exclusions. Same-barrel
    games draw from the main range, skipping the entry's numbers and unwanted ones.
    """
    if rules.separate_barrel:
        return int(rng.integers(1, rules.bonus_range + 1))

    taken = set(entry) | set(unwanted)
    pool = [n for n in range(1, rules.main_range + 1) if n not in taken]
    return int(rng.choice(pool))


def eligible_pool(numbers: Sequence[int], unwanted, limit: int) -> List[int]:
    return [n for n in numbers if n not in unwanted][:limit]


def build_narrative(profile: FrequencyProfile,
                    request: PredictionRequest,
                    lucky: Sequence[int]) -> str:
    """Describe how the local result was produced."""
    unwanted = request.unwanted_numbers
    hot = eligible_pool(profile.hot, unwanted, SELECTION_CONFIG['narrative_hot_count'])
    cold = eligible_pool(profile.cold, unwanted, SELECTION_CONFIG['narrative_cold_count'])

    parts = [
        "Offline fallback: these numbers were generated locally because the remote "
        "AI prediction service was unavailable. No AI model was consulted."
    ]

    if profile.is_empty:
        parts.append("No usable draw history was supplied, so the hot and cold pools "
                     "simply follow numeric order.")
    else:
        parts.append(f"Frequency analysis counted {profile.total_tokens} numbers from the supplied history.")

    hot_pct = round(SELECTION_CONFIG['hot_threshold'] * 100)
    cold_pct = round((SELECTION_CONFIG['cold_threshold'] - SELECTION_CONFIG['hot_threshold']) * 100)
    parts.append(
        f"Hot numbers considered: {', '.join(map(str, hot)) or 'none'}. "
        f"Cold numbers considered: {', '.join(map(str, cold)) or 'none'}. "
        f"About {hot_pct}% of draws came from the hot pool, {cold_pct}% from the cold pool "
        f"and the rest uniformly from the full range."
    )

    if unwanted:
        parts.append(f"Excluded numbers: {', '.join(map(str, sorted(unwanted)))}.")
    if lucky:
        parts.append(f"Lucky numbers included in every entry: {', '.join(map(str, lucky))}.")
    skipped = [n for n in request.lucky_numbers if n not in lucky]
    if skipped:
        parts.append(f"Lucky numbers that could not be used: {', '.join(map(str, skipped))}.")

    parts.append("Lottery draws are random; this selection does not improve the odds of winning.")
    return ' '.join(parts)


def generate(rules: GameRules,
             profile: FrequencyProfile,
             request: PredictionRequest,
             rng: Optional[np.random.Generator] = None,
             seed: Optional[int] = None) -> PredictionResult:
    """
    Generate entries from a frequency profile.

    Args:
        rules: Game rules
        profile: Frequency profile from analyze()
        request: Entry count, lucky and unwanted numbers, optional system size
        rng: Random generator; a new one is created from seed if omitted
        seed: Seed used when rng is omitted

    Returns:
        PredictionResult with one sorted entry (and bonus number) per requested entry

    Raises:
        InsufficientPoolError: If exclusions leave too few numbers, raised before any draw
    """
    target = check_pool(rules, request)
    rng = make_rng(rng, seed)
    lucky = usable_lucky_numbers(rules, request)

    entries = []
    bonus_numbers = [] if rules.has_bonus else None
    for _ in range(request.entry_count):
        entry = fill_entry(rules, profile, request, lucky, target, rng)
        entries.append(entry)
        if bonus_numbers is not None:
            bonus_numbers.append(draw_bonus(rules, entry, request.unwanted_numbers, rng))

    low, high = CONFIDENCE_RANGE
    confidence_score = int(rng.integers(low, high + 1))

    logger.info(f"Generated {len(entries)} local entries of {target} numbers for {rules.name}")

    return PredictionResult(
        entries=entries,
        bonus_numbers=bonus_numbers,
        narrative=build_narrative(profile, request, lucky),
        method_tags=list(METHOD_TAGS),
        confidence_score=confidence_score,
        system_label=request.system_label(rules),
        suggested_numbers=eligible_pool(profile.hot, request.unwanted_numbers,
                                        SELECTION_CONFIG['narrative_hot_count']),
        source=LOCAL_SOURCE,
    )


def predict_locally(rules: GameRules,
                    history_text: Optional[str],
                    request: PredictionRequest,
                    rng: Optional[np.random.Generator] = None,
                    seed: Optional[int] = None) -> PredictionResult:
    """Analyze the history once and generate a local prediction from it."""
    profile = analyze(history_text, rules.main_range)
    return generate(rules, profile, request, rng=rng, seed=seed)


def save_predictions(result: PredictionResult,
                     output_dir: Union[str, Path],
                     game: str = '') -> Tuple[Path, Path]:
    """Save a result to both JSON and formatted text files."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().isoformat()
    date_str = datetime.now().strftime("%Y-%m-%d")

    json_data = {
        "timestamp": timestamp,
        "date": date_str,
        "game": game,
        "prediction": result.to_dict(),
        "metadata": {
            "generation_method": result.source,
            "count": len(result.entries),
        },
    }

    json_path = output_dir / f"predictions_{date_str}.json"
    with open(json_path, 'w') as f:
        json.dump(json_data, f, indent=2)

    text_path = output_dir / f"formatted_predictions_{date_str}.txt"
    with open(text_path, 'w') as f:
        f.write(f"LOTTERY NUMBERS - {game} - {date_str} ({result.system_label})\n")
        f.write("=" * 50 + "\n\n")
        f.write(format_entries(result) + "\n")
        f.write("\n" + "=" * 50 + "\n")
        f.write(result.narrative + "\n")
        f.write(f"Display score (cosmetic, not a probability): {result.confidence_score}\n")

    logger.info(f"Saved predictions to {json_path} and {text_path}")
    return json_path, text_path


def format_entries(result: PredictionResult) -> str:
    lines = []
    for i, entry in enumerate(result.entries, 1):
        line = f"{i}. {', '.join(map(str, entry))}"
        if result.bonus_numbers is not None:
            line += f" + {result.bonus_numbers[i - 1]}"
        lines.append(line)
    return '\n'.join(lines)
