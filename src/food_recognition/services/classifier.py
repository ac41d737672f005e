"""Label classification and name normalization."""

import re
from collections.abc import Sequence

from food_recognition.domain.categories import (
    FOOD_KEYWORDS,
    FOOD_PARENT_NAMES,
    GENERIC_FOOD_LABELS,
)
from food_recognition.domain.labels import Label

_SUFFIX_PATTERN = re.compile(r"\s+(Food|Item|Product)$", re.IGNORECASE)
_PREFIX_PATTERN = re.compile(r"^(Fresh|Organic|Raw|Cooked)\s+", re.IGNORECASE)


def is_food_relevant(label: Label) -> bool:
    """Return True when a label names food by keyword or by a food parent."""
    return _has_food_keyword(label.name) or _has_food_parent(label)


def normalize_food_name(name: str) -> str:
    """Strip descriptive affixes from a label name.

    Stacked affixes ("Fresh Organic Apple") are stripped until the name stops
    changing, so normalizing a canonical name returns it unchanged.
    """
    canonical = name.strip()
    while True:
        stripped = _SUFFIX_PATTERN.sub("", canonical, count=1)
        stripped = _PREFIX_PATTERN.sub("", stripped, count=1).strip()
        if stripped == canonical:
            return canonical
        canonical = stripped


def is_generic_label(label: Label) -> bool:
    """Return True for broad category labels such as "Fruit"."""
    return (
        label.name in GENERIC_FOOD_LABELS
        or normalize_food_name(label.name) in GENERIC_FOOD_LABELS
    )


def suppressed_generic_labels(labels: Sequence[Label]) -> list[bool]:
    """Flag generic labels outranked by a specific food label in the batch.

    The result is aligned with ``labels``. A generic label is flagged only when
    another label in the same batch is both food-relevant and non-generic.
    """
    generic = [is_generic_label(label) for label in labels]
    # A generic label is never specific, so any specific label is "another".
    has_specific = any(
        not is_generic and is_food_relevant(label)
        for label, is_generic in zip(labels, generic, strict=True)
    )
    return [is_generic and has_specific for is_generic in generic]


def _has_food_keyword(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in FOOD_KEYWORDS)


def _has_food_parent(label: Label) -> bool:
    return any(parent in FOOD_PARENT_NAMES for parent in label.parents)
