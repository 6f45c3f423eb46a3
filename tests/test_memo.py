"""Tests for memoization slots."""

from unittest.mock import MagicMock

from stance_github.api.memo import CacheState, MemoSlot


def test_starts_unfetched():
    slot = MemoSlot("orgs")
    assert slot.state is CacheState.UNFETCHED
    assert not slot.fetched


def test_fetches_once():
    fetch = MagicMock(return_value=[1, 2])
    slot = MemoSlot("orgs")

    assert slot.get(fetch) == [1, 2]
    assert slot.get(fetch) == [1, 2]

    fetch.assert_called_once()
    assert slot.state is CacheState.FETCHED


def test_falsy_values_are_memoized():
    fetch = MagicMock(return_value={})
    slot = MemoSlot("details")

    slot.get(fetch)
    slot.get(fetch)

    fetch.assert_called_once()


def test_none_is_not_memoized():
    fetch = MagicMock(side_effect=[None, ['ok']])
    slot = MemoSlot("repos")

    assert slot.get(fetch) is None
    assert slot.state is CacheState.UNFETCHED
    assert slot.get(fetch) == ['ok']
    assert fetch.call_count == 2


def test_clear_is_idempotent():
    fetch = MagicMock(return_value='value')
    slot = MemoSlot("issues")

    slot.clear()
    slot.get(fetch)
    slot.clear()
    slot.clear()

    assert slot.state is CacheState.UNFETCHED
    slot.get(fetch)
    assert fetch.call_count == 2
