from typing import Any, Dict, Sequence

from ..models.summary import Direction
from ..utils.helpers import to_list


def derive_direction(sources: Sequence[Any], destinations: Sequence[Any]) -> Direction:
    """
    Classify a telegram's traffic direction from its declared endpoints.

    Only presence matters: duplicated or reordered endpoints give the same
    result, and a telegram with no endpoints at all is UNSET rather than an
    error.
    """
    has_source = len(sources) > 0
    has_destination = len(destinations) > 0

    if has_source and has_destination:
        return Direction.SOURCE_SINK
    if has_source:
        return Direction.SOURCE
    if has_destination:
        return Direction.SINK
    return Direction.UNSET


def telegram_direction(telegram: Dict[str, Any]) -> Direction:
    """Direction of a parsed telegram node from its source/destination tags"""
    return derive_direction(
        to_list(telegram.get('source')),
        to_list(telegram.get('destination'))
    )
