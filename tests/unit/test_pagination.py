"""Tests for page slicing."""
import math

from booking_api.pagination import paginate_results


def test_first_page_has_next_but_no_previous():
    result = paginate_results(list(range(1, 6)), page=1, limit=2)

    assert result["results"] == [1, 2]
    assert result["total"] == 5
    assert result["page"] == 1
    assert result["limit"] == 2
    assert result["totalPages"] == 3
    assert result["next"] == {"page": 2, "limit": 2}
    assert "previous" not in result


def test_middle_page_has_both_links():
    result = paginate_results(list(range(1, 6)), page=2, limit=2)

    assert result["results"] == [3, 4]
    assert result["next"] == {"page": 3, "limit": 2}
    assert result["previous"] == {"page": 1, "limit": 2}


def test_last_page_is_partial_and_has_no_next():
    result = paginate_results(list(range(1, 6)), page=3, limit=2)

    assert result["results"] == [5]
    assert "next" not in result
    assert result["previous"] == {"page": 2, "limit": 2}


def test_page_beyond_last_is_empty():
    """Past the end: no results, no next, previous still points back."""
    result = paginate_results(list(range(1, 6)), page=10, limit=2)

    assert result["results"] == []
    assert "next" not in result
    assert result["previous"] == {"page": 9, "limit": 2}
    assert result["total"] == 5


def test_empty_collection():
    result = paginate_results([], page=1, limit=10)

    assert result["results"] == []
    assert result["total"] == 0
    assert result["totalPages"] == 0
    assert "next" not in result
    assert "previous" not in result


def test_exact_multiple_has_no_next_on_last_page():
    result = paginate_results(list(range(4)), page=2, limit=2)

    assert result["results"] == [2, 3]
    assert "next" not in result
    assert result["totalPages"] == 2


def test_page_size_and_links_follow_the_slicing_rules():
    """results length, totalPages and link presence for a range of inputs."""
    for total in range(0, 12):
        data = list(range(total))
        for limit in range(1, 6):
            for page in range(1, 6):
                result = paginate_results(data, page=page, limit=limit)

                expected_len = min(limit, max(0, total - (page - 1) * limit))
                assert len(result["results"]) == expected_len
                assert result["totalPages"] == math.ceil(total / limit)
                assert ("next" in result) == (page * limit < total)
                assert ("previous" in result) == (page > 1)
