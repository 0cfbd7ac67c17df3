"""
Decision Scoring Engine - Stored Weight Preferences.

============================================================
RESPONSIBILITY
============================================================
Converts the user's saved weight preference into a WeightVector.

- Percent sliders (0-100 per criterion) must total exactly 100
- "cost=25,time=20,..." strings for environment / CLI input
- JSON files holding either form

A missing preference is returned as None; the blender then
applies the balanced default table.

============================================================
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .types import Criterion, InvalidWeightsError, WeightVector

logger = logging.getLogger(__name__)


PERCENT_TOTAL = 100


def _to_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidWeightsError(f"Weight for '{name}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidWeightsError(
            f"Weight for '{name}' must be a number, got {value!r}"
        ) from None


def weights_from_percentages(percentages: Mapping[str, Any]) -> WeightVector:
    """
    Convert percent sliders into a fractional weight vector.

    Args:
        percentages: criterion -> integer percentage (missing = 0)

    Returns:
        WeightVector with each value divided by 100

    Raises:
        InvalidWeightsError: If a value is invalid or the total is not 100
    """
    values: Dict[str, float] = {}
    for criterion in Criterion.all_criteria():
        raw = percentages.get(criterion.value, 0)
        values[criterion.value] = _to_number(criterion.value, raw if raw is not None else 0)

    total = sum(values.values())
    if abs(total - PERCENT_TOTAL) > 1e-9:
        raise InvalidWeightsError(
            f"Weights must total 100% (currently {total:g}%)"
        )

    return WeightVector(**{name: value / PERCENT_TOTAL for name, value in values.items()})


def weights_to_percentages(weights: WeightVector) -> Dict[str, int]:
    """Return the vector as rounded integer percentages for display."""
    return {name: int(round(value * PERCENT_TOTAL)) for name, value in weights.as_dict().items()}


def parse_weight_string(text: str) -> WeightVector:
    """
    Parse "cost=25,time=20,risk=25,priority=15,reward=15".

    Values above 1 are read as percentages and must total 100.
    Otherwise values are read as fractions and used as given.

    Raises:
        InvalidWeightsError: On malformed pairs or unknown criteria
    """
    known = {c.value for c in Criterion.all_criteria()}
    values: Dict[str, float] = {}

    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if "=" not in part:
            raise InvalidWeightsError(f"Malformed weight entry '{part}' (expected name=value)")
        name, raw = (p.strip() for p in part.split("=", 1))
        name = name.lower()
        if name not in known:
            raise InvalidWeightsError(f"Unknown criterion '{name}'")
        values[name] = _to_number(name, raw)

    if not values:
        raise InvalidWeightsError("Weight string is empty")

    if any(v > 1 for v in values.values()):
        return weights_from_percentages(values)
    return WeightVector.from_mapping(values)


def load_user_weights(
    source: Union[None, str, Path, Mapping[str, Any]],
) -> Optional[WeightVector]:
    """
    Load a stored weight preference.

    Args:
        source: None (no preference), a mapping, a weight string,
                or a path to a JSON file holding a mapping

    Returns:
        WeightVector, or None when nothing is stored
    """
    if source is None:
        return None

    if isinstance(source, Mapping):
        data: Any = source
    elif isinstance(source, Path) or (isinstance(source, str) and source.endswith(".json")):
        path = Path(source)
        if not path.exists():
            logger.info(f"No stored weight preference at {path}")
            return None
        data = json.loads(path.read_text(encoding="utf-8"))
    else:
        return parse_weight_string(str(source))

    if not isinstance(data, Mapping):
        raise InvalidWeightsError("Stored weight preference must be a JSON object")
    if not data:
        return None

    numbers = {str(k): _to_number(str(k), v) for k, v in data.items() if v is not None}
    if any(v > 1 for v in numbers.values()):
        return weights_from_percentages(numbers)
    return WeightVector.from_mapping(numbers)
