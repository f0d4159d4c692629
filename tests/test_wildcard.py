"""Tests for LIKE wildcard patching."""

import pytest

from paginate.models import PaginateConfig, Query
from paginate.wildcard import patch_like_query


@pytest.fixture
def config():
    return PaginateConfig(where={"name": "like ?", "id": "= ?"})


def _query():
    return Query(where_args={"name": "bob", "id": 38, "bogus": "blah"}, search="yodda")


def test_prepend_only(config):
    q = patch_like_query(config, _query(), True, False)
    assert len(q.where_args) == 3  # No field was added or removed.
    assert q.where_args["name"] == "%bob"
    assert q.where_args["bogus"] == "blah"  # Not a where clause.
    assert q.where_args["id"] == 38  # Not a string.
    assert q.search == "%yodda"


def test_append_only(config):
    q = patch_like_query(config, _query(), False, True)
    assert q.where_args == {"name": "bob%", "id": 38, "bogus": "blah"}
    assert q.search == "yodda%"


def test_patching_twice_adds_nothing(config):
    once = patch_like_query(config, _query(), False, True)
    twice = patch_like_query(config, once, True, True)
    assert twice == once

    both = patch_like_query(config, _query())
    assert both.where_args["name"] == "%bob%"
    assert patch_like_query(config, both) == both


def test_original_query_and_config_untouched(config):
    query = _query()
    before = config.model_dump()
    patch_like_query(config, query)
    assert query.where_args["name"] == "bob"
    assert query.search == "yodda"
    assert config.model_dump() == before


def test_key_and_operator_case_are_ignored():
    config = PaginateConfig(where={"Name": "LIKE ?"})
    q = patch_like_query(config, Query(where_args={" NAME ": "bob"}))
    assert q.where_args == {" NAME ": "%bob%"}


def test_empty_search_is_not_patched(config):
    assert patch_like_query(config, Query()).search == ""


def test_value_with_inner_wildcard_untouched(config):
    q = patch_like_query(config, Query(where_args={"name": "b%b"}, search="y%"))
    assert q.where_args["name"] == "b%b"
    assert q.search == "y%"
