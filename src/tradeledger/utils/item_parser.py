"""Item specification parsing utilities."""

from tradeledger.domain.entities import ItemRequest


def parse_item(item_str: str) -> ItemRequest:
    """Parse a "NAME:QUANTITY" item specification.

    A missing quantity means one unit. Examples:
    - "Silver Sword:2"
    - "Silver Sword" (quantity 1)

    Args:
        item_str: Item specification

    Returns:
        ItemRequest

    Raises:
        ValueError: If the name is empty or the quantity is not an integer
    """
    if not item_str or not item_str.strip():
        raise ValueError("Empty item specification")

    name, sep, quantity_str = item_str.strip().rpartition(":")
    if not sep:
        name, quantity_str = quantity_str, "1"

    name = name.strip()
    if not name:
        raise ValueError(f"Missing good name in item '{item_str}'")

    try:
        quantity = int(quantity_str.strip())
    except ValueError:
        raise ValueError(f"Invalid quantity '{quantity_str.strip()}' in item '{item_str}'")

    return ItemRequest(good_name=name, quantity=quantity)
