"""Tests for page size and offset resolution."""

import pytest
from pydantic import ValidationError

from paginate.errors import InvalidPageError
from paginate.models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PaginateConfig, Query
from paginate.pagination import resolve_page_size, resolve_window


def test_config_resolves_defaults_at_construction():
    config = PaginateConfig()
    assert config.default_page_size == DEFAULT_PAGE_SIZE
    assert config.max_page_size == MAX_PAGE_SIZE


def test_unset_page_sizes_resolve_independently():
    assert PaginateConfig(default_page_size=3).max_page_size == MAX_PAGE_SIZE
    assert PaginateConfig(max_page_size=10).default_page_size == DEFAULT_PAGE_SIZE


def test_config_is_immutable():
    config = PaginateConfig()
    with pytest.raises(ValidationError):
        config.max_page_size = 5


def test_zero_page_size_uses_default():
    assert resolve_page_size(PaginateConfig(default_page_size=3), Query()) == 3


def test_requested_page_size_within_max():
    assert resolve_page_size(PaginateConfig(max_page_size=100), Query(page_size=40)) == 40


def test_requested_page_size_clamps_to_max():
    assert resolve_page_size(PaginateConfig(max_page_size=100), Query(page_size=1000)) == 100


def test_default_larger_than_max_is_clamped():
    config = PaginateConfig(default_page_size=500, max_page_size=50)
    assert resolve_page_size(config, Query()) == 50


@pytest.mark.parametrize("page", [0, -1])
def test_invalid_page(page):
    with pytest.raises(InvalidPageError) as exc_info:
        resolve_window(PaginateConfig(), Query(page=page))
    assert exc_info.value.code == "INVALID_PAGE"


def test_offset_for_pages():
    config = PaginateConfig(default_page_size=10)
    assert resolve_window(config, Query(page=1)) == (10, 0)
    assert resolve_window(config, Query(page=3)) == (10, 20)


def test_offset_does_not_overflow():
    config = PaginateConfig(max_page_size=2**16 - 1)
    page_size, offset = resolve_window(config, Query(page=2**32 - 1, page_size=2**16 - 1))
    assert page_size == 2**16 - 1
    assert offset == (2**16 - 1) * (2**32 - 2)


def test_negative_page_size_rejected_by_model():
    with pytest.raises(ValidationError):
        Query(page_size=-1)
