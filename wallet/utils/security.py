"""
Security utilities for masking sensitive data in logs.

Provides functions to safely mask sensitive information like:
- Transaction PINs
- Bank account numbers
"""


def mask_pin(pin: str | None) -> str:
    """
    Completely mask transaction PIN - never show any digit.

    Args:
        pin: PIN to mask

    Returns:
        Always returns '****' when a PIN is present

    Note:
        PINs should NEVER appear in logs, even partially.
    """
    return "****" if pin else "***"


def mask_account_number(account_number: str | None) -> str:
    """
    Mask bank account number for logging: ******6789

    Args:
        account_number: Account number to mask

    Returns:
        Masked number showing only the last 4 digits

    Examples:
        >>> mask_account_number("0123456789")
        '******6789'
        >>> mask_account_number("123")
        '***'
        >>> mask_account_number(None)
        '***'
    """
    if not account_number or len(account_number) <= 4:
        return "***"
    return f"{'*' * (len(account_number) - 4)}{account_number[-4:]}"
