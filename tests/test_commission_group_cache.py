"""
Commission Group Cache Tests
"""

from unittest.mock import Mock

import pytest
import requests

from awin_api.extract.commission_groups import CommissionGroupCache
from awin_api.extract.schemas import CommissionGroup


def _groups(advertiser_id, *ids):
    return [
        CommissionGroup(groupId=group_id, advertiserId=advertiser_id, groupName=f"Group {group_id}")
        for group_id in ids
    ]


def test_resolving_twice_fetches_once():
    fetch = Mock(return_value=_groups(7, "42"))
    cache = CommissionGroupCache(fetch)

    first = cache.resolve("42", 7)
    second = cache.resolve("42", 7)

    assert first is second
    assert first.groupName == "Group 42"
    fetch.assert_called_once_with(7)


def test_miss_populates_every_group_of_the_advertiser():
    fetch = Mock(return_value=_groups(7, "1", "2", "3"))
    cache = CommissionGroupCache(fetch)

    assert cache.resolve("2", 7).id == "2"

    assert len(cache) == 3
    assert "1" in cache and "3" in cache
    assert cache.resolve("3", 7).id == "3"
    fetch.assert_called_once()


@pytest.mark.parametrize("group_id", ["", None])
def test_empty_id_never_fetches(group_id):
    fetch = Mock()
    cache = CommissionGroupCache(fetch)

    assert cache.resolve(group_id, 7) is None
    fetch.assert_not_called()


def test_fetch_failure_is_swallowed():
    fetch = Mock(side_effect=requests.ConnectionError("boom"))
    cache = CommissionGroupCache(fetch)

    assert cache.resolve("42", 7) is None
    assert len(cache) == 0


def test_unknown_id_after_fetch_is_none():
    fetch = Mock(return_value=_groups(7, "1"))
    cache = CommissionGroupCache(fetch)

    assert cache.resolve("99", 7) is None
    assert cache.get("1") is not None


def test_entries_are_never_overwritten():
    original = _groups(7, "1")[0]
    replacement = CommissionGroup(groupId="1", advertiserId=8, groupName="Other")
    fetch = Mock(side_effect=[[original], [replacement, *_groups(8, "5")]])
    cache = CommissionGroupCache(fetch)

    cache.resolve("1", 7)
    cache.resolve("5", 8)

    assert cache.get("1") is original
    assert cache.get(5).advertiserId == 8
