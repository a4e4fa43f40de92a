"""Domain normalization helpers for raw ledger values."""


def normalize_code(value: str | None) -> str:
    """Normalize enum-like codes such as types and statuses.

    Args:
        value: Raw code from the ledger store.

    Returns:
        str: Upper-cased, stripped code, empty when missing.
    """
    if not value:
        return ""
    return str(value).strip().upper()


def normalize_reference(value) -> str | None:
    """Normalize optional record references.

    Args:
        value: Raw foreign key value from the ledger store.

    Returns:
        str | None: Reference as a string, None when missing or blank.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


__all__ = ["normalize_code", "normalize_reference"]
