"""Utilities for exercise name matching and rep descriptor timing."""

import math
import re
from difflib import SequenceMatcher

from ..models.exercises import ADULT_EXERCISES, ExerciseTemplate

SECONDS_PER_REP = 3
DEFAULT_WORK_SECONDS = 40  # Descriptors we cannot read, e.g. "AMRAP"
MIN_WORK_SECONDS = 10

_NUMBER = r"(\d+(?:\.\d+)?)"
_RANGE = re.compile(rf"{_NUMBER}\s*(?:-|–|to)\s*{_NUMBER}")
_SINGLE = re.compile(_NUMBER)
_SECONDS = re.compile(r"\b(?:s|sec|secs|second|seconds)\b")
_MINUTES = re.compile(r"\b(?:m|min|mins|minute|minutes)\b")
_EACH = re.compile(r"\beach\b|\bper side\b|/side\b")


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, removes extra whitespace and punctuation, and
    expands common abbreviations.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"[()]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized).strip()

    abbreviations = {
        "db": "dumbbell",
        "bw": "bodyweight",
        "rdl": "romanian deadlift",
    }

    if normalized in abbreviations:
        return abbreviations[normalized]

    for abbrev, full in abbreviations.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def find_matching_exercise(
    name: str,
    exercises: tuple[ExerciseTemplate, ...] | list[ExerciseTemplate] | None = None,
    threshold: float = 0.8,
) -> ExerciseTemplate | None:
    """Find the best matching exercise template.

    Args:
        name: The exercise name to match
        exercises: Templates to search (defaults to the adult library)
        threshold: Minimum similarity ratio (0-1) to consider a match

    Returns:
        The best matching template or None if no match above threshold
    """
    if exercises is None:
        exercises = ADULT_EXERCISES

    normalized_name = normalize_exercise_name(name)

    best_match: ExerciseTemplate | None = None
    best_score = 0.0

    for exercise in exercises:
        candidates = [exercise.name, *exercise.aliases]
        for candidate in candidates:
            normalized_candidate = normalize_exercise_name(candidate)
            if normalized_candidate == normalized_name:
                return exercise

            score = SequenceMatcher(None, normalized_name, normalized_candidate).ratio()
            if score > best_score:
                best_score = score
                best_match = exercise

    if best_score >= threshold:
        return best_match
    return None


def estimate_work_seconds(reps: str) -> int:
    """Estimate the working time of one set from its rep descriptor.

    "10" and "8-12" are counted at SECONDS_PER_REP per rep (ranges use the
    midpoint), "each"/"each side" doubles the count, and "30 sec" or
    "3 min" are taken literally. Never returns less than MIN_WORK_SECONDS.
    """
    text = reps.lower().strip()

    range_match = _RANGE.search(text)
    if range_match:
        amount = (float(range_match.group(1)) + float(range_match.group(2))) / 2
    else:
        single_match = _SINGLE.search(text)
        if not single_match:
            return DEFAULT_WORK_SECONDS
        amount = float(single_match.group(1))

    if _MINUTES.search(text):
        seconds = amount * 60
    elif _SECONDS.search(text):
        seconds = amount
    else:
        seconds = amount * SECONDS_PER_REP

    if _EACH.search(text):
        seconds *= 2

    return max(MIN_WORK_SECONDS, math.ceil(seconds))


def reduce_reps(reps: str, by: int = 2, minimum: int = 6, above: int = 8) -> str:
    """Trim a plain numeric rep count, e.g. "12" -> "10".

    Ranges, per-side counts and time-based descriptors are returned unchanged.
    """
    text = reps.strip()
    if not text.isdigit():
        return reps
    count = int(text)
    if count <= above:
        return reps
    return str(max(minimum, count - by))
