"""
Decision Scoring Engine - Input Sanitization.

============================================================
RESPONSIBILITY
============================================================
Runs once per option before scoring so every sub-score sees
the same defaults.

- Missing cost / time_required -> 0
- Missing risk_level / priority / reward_potential -> 5 (neutral)
- Numeric strings are coerced, other junk counts as missing
- Values are clamped into their documented domains
- Missing identifiers become "option-<n>" (1-based position)

A present zero stays zero. Bad values never raise; only a
record that is not an object at all is rejected. Label checks
are the engine's job.

============================================================
"""

import math
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Union

from .config import ATTRIBUTE_SCALE_MAX, NEUTRAL_ATTRIBUTE_VALUE
from .types import InvalidInputError, Option


OptionLike = Union[Option, Mapping[str, Any]]


def coerce_number(value: Any) -> Optional[float]:
    """
    Convert a raw attribute to float.

    Returns None for missing, non-numeric, NaN or infinite values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _non_negative(value: Any) -> float:
    number = coerce_number(value)
    if number is None:
        return 0.0
    return max(0.0, number)


def _scaled(value: Any) -> float:
    number = coerce_number(value)
    if number is None:
        return NEUTRAL_ATTRIBUTE_VALUE
    return max(0.0, min(ATTRIBUTE_SCALE_MAX, number))


def to_option(raw: OptionLike) -> Option:
    """Accept an Option or a plain record."""
    if isinstance(raw, Option):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Option records must be objects, got {type(raw).__name__}"
        )
    return Option.from_dict(raw)


def sanitize_option(raw: OptionLike, position: int = 0) -> Option:
    """
    Return a copy of the option with every scored attribute set.

    Args:
        raw: Option or record
        position: 0-based input position, used for missing ids
    """
    option = to_option(raw)

    option_id = option.option_id
    if option_id is None or not str(option_id).strip():
        option_id = f"option-{position + 1}"

    label = option.label.strip() if isinstance(option.label, str) else option.label

    feasibility = coerce_number(option.feasibility)

    return replace(
        option,
        option_id=str(option_id),
        label=label,
        cost=_non_negative(option.cost),
        time_required=_non_negative(option.time_required),
        risk_level=_scaled(option.risk_level),
        priority=_scaled(option.priority),
        reward_potential=_scaled(option.reward_potential),
        feasibility=_scaled(feasibility) if feasibility is not None else None,
    )


def sanitize_options(options: Iterable[OptionLike]) -> List[Option]:
    """Sanitize every option, keeping input order."""
    return [sanitize_option(o, i) for i, o in enumerate(options)]


def collect_options(records: Iterable[OptionLike]) -> List[Option]:
    """
    Keep only the rows a user actually filled in.

    Form rows with a blank label are dropped silently, the way
    an option editor ignores empty entries. The surviving rows
    are sanitized; the two-option minimum is left to the engine.
    """
    kept = [o for o in (to_option(r) for r in records) if o.has_label]
    return sanitize_options(kept)
