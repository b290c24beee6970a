"""Input validation utilities."""

from decimal import Decimal, InvalidOperation

from wallet.config.business_constants import PIN_LENGTH


def is_valid_pin(pin: str | None) -> bool:
    """
    Check transaction PIN format.

    Args:
        pin: PIN to check

    Returns:
        True if PIN is exactly PIN_LENGTH ASCII digits
    """
    if not pin or len(pin) != PIN_LENGTH:
        return False
    return all(ch in "0123456789" for ch in pin)


def parse_amount(value: str | int | float | Decimal | None) -> Decimal:
    """
    Parse user-entered amount into Decimal.

    Empty or unparseable input becomes zero, matching how the
    amount field treats a blank entry.

    Args:
        value: Raw amount value

    Returns:
        Parsed amount (Decimal("0") when invalid)
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return Decimal("0")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return Decimal("0")

    if not amount.is_finite():
        return Decimal("0")
    return amount
