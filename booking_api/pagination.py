"""Page slicing for list endpoints."""
import math
from typing import Any, Dict, Sequence


def paginate_results(
    data: Sequence[Any],
    page: int = 1,
    limit: int = 10
) -> Dict[str, Any]:
    """
    Slice a sequence into a 1-indexed page.

    Page and limit are assumed to be validated already
    (page >= 1, 1 <= limit <= 100).

    Args:
        data: Full ordered collection
        page: Page number, starting at 1
        limit: Page size

    Returns:
        Dict with results, total, page, limit, totalPages and optional
        next/previous page descriptors

    Example:
        >>> paginate_results([1, 2, 3], page=1, limit=2)["next"]
        {'page': 2, 'limit': 2}
    """
    start_index = (page - 1) * limit
    end_index = page * limit

    payload: Dict[str, Any] = {}

    if end_index < len(data):
        payload["next"] = {"page": page + 1, "limit": limit}

    if start_index > 0:
        payload["previous"] = {"page": page - 1, "limit": limit}

    payload["results"] = list(data[start_index:end_index])
    payload["total"] = len(data)
    payload["page"] = page
    payload["limit"] = limit
    payload["totalPages"] = math.ceil(len(data) / limit)

    return payload
