from typing import Iterable, List, Optional, Sequence


def require_int(value, name: str, minimum: Optional[int] = None) -> int:
    """
    Check that a value is a plain integer, optionally with a lower bound.

    Args:
        value: Value to check
        name: Field name used in the error message
        minimum: Smallest accepted value (inclusive)

    Returns:
        The value as an int

    Raises:
        ValueError: If the value is not an integer or is below the minimum
    """
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")

    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")

    return value


def unique_numbers(numbers: Optional[Iterable[int]], name: str = 'numbers') -> List[int]:
    """Deduplicate a collection of integers, keeping first-seen order."""
    if numbers is None:
        return []

    result = []
    seen = set()
    for n in numbers:
        require_int(n, name)
        if n not in seen:
            seen.add(n)
            result.append(n)
    return result


def validate_entry(entry: Sequence[int],
                   numbers_count: int,
                   min_value: int = 1,
                   max_value: int = 59,
                   excluded: Iterable[int] = ()) -> List[int]:
    """
    Ensure an entry is a valid set of lottery numbers.

    Args:
        entry: Numbers of a single entry
        numbers_count: Expected count of numbers
        min_value: Minimum valid number
        max_value: Maximum valid number
        excluded: Numbers that must not appear

    Returns:
        Sorted list of the entry's numbers

    Raises:
        ValueError: If the entry is invalid
    """
    entry = list(entry)

    if len(entry) != numbers_count:
        raise ValueError(f"Entry must contain exactly {numbers_count} numbers, got {len(entry)}")

    if not all(isinstance(n, int) for n in entry):
        raise ValueError("All entry numbers must be integers")

    out_of_range = [n for n in entry if not (min_value <= n <= max_value)]
    if out_of_range:
        raise ValueError(f"All numbers must be between {min_value} and {max_value}, got {out_of_range}")

    if len(set(entry)) != len(entry):
        duplicates = sorted({n for n in entry if entry.count(n) > 1})
        raise ValueError(f"Entry contains duplicate numbers: {duplicates}")

    excluded = set(excluded)
    forbidden = sorted(n for n in entry if n in excluded)
    if forbidden:
        raise ValueError(f"Entry contains excluded numbers: {forbidden}")

    return sorted(entry)
