"""
Paged reads for queries whose full result may exceed the PostgREST row cap.

Supabase answers at most `max-rows` (1000 by default) rows per request, so
reads that must return every matching row walk the result with `.range()`
until a short page comes back. The query must have a total order.
"""
from typing import Any, Callable, Dict, List

PAGE_SIZE = 1000


def fetch_all(build_query: Callable[[], Any], page_size: int = PAGE_SIZE) -> List[Dict[str, Any]]:
    """
    Execute `build_query()` page by page and concatenate the rows.

    Args:
        build_query: Returns a fresh, fully filtered and ordered query builder
        page_size: Rows requested per round trip; must not exceed max-rows

    Returns:
        Every matching row in query order
    """
    rows: List[Dict[str, Any]] = []
    start = 0
    while True:
        result = build_query().range(start, start + page_size - 1).execute()
        page = result.data or []
        rows.extend(page)
        if len(page) < page_size:
            return rows
        start += page_size
