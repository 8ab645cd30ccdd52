"""
Multi-map flattening for JSON output.
"""

from typing import Dict, Iterable, List, Tuple

from starlette.datastructures import Headers, QueryParams

from ..models import FlattenedMap


def flatten(items: Iterable[Tuple[str, str]], drop_empty: bool = False) -> FlattenedMap:
    """
    Collapse ordered ``(key, value)`` pairs into a single-value-or-list mapping.

    Keys keep their first-occurrence order. A key seen once maps to its value,
    a key seen several times maps to the list of its values in original order.

    Args:
        items: ordered key/value pairs, duplicates allowed
        drop_empty: skip empty values; a key left without values is omitted

    Returns:
        FlattenedMap
    """
    grouped: Dict[str, List[str]] = {}
    for key, value in items:
        if drop_empty and not value:
            continue
        grouped.setdefault(key, []).append(value)

    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


def flatten_headers(headers: Headers) -> FlattenedMap:
    # Empty header values are dropped, query parameters keep them.
    return flatten(headers.items(), drop_empty=True)


def flatten_query(query_params: QueryParams) -> FlattenedMap:
    return flatten(query_params.multi_items())
