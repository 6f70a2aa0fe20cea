"""Tests for item specification parsing."""

import pytest

from tradeledger.domain.entities import ItemRequest
from tradeledger.utils.item_parser import parse_item


@pytest.mark.parametrize(
    "item_str,expected",
    [
        ("Silver Sword:2", ItemRequest(good_name="Silver Sword", quantity=2)),
        ("  Oak Shield : 3 ", ItemRequest(good_name="Oak Shield", quantity=3)),
        ("Silver Sword", ItemRequest(good_name="Silver Sword", quantity=1)),
    ],
)
def test_parse_item(item_str, expected):
    assert parse_item(item_str) == expected


def test_non_positive_quantity_is_left_to_the_engine():
    assert parse_item("Silver Sword:0").quantity == 0


@pytest.mark.parametrize("item_str", ["", "   ", ":2", "Silver Sword:two", "Silver Sword:1.5"])
def test_invalid_items(item_str):
    with pytest.raises(ValueError):
        parse_item(item_str)
