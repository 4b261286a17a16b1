"""Shared field validators for input schemas."""


def strip_required(value: str | None, label: str) -> str:
    """Trim a required string, rejecting null, empty and whitespace-only values."""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    value = value.strip()
    if not value:
        raise ValueError(f"{label} cannot be empty or whitespace only")
    return value


def strip_optional(value: str | None) -> str | None:
    """Trim an optional string; blank becomes None."""
    if value is None:
        return None
    return value.strip() or None


def reject_null(value, label: str):
    """Reject an explicit null on a field that cannot be cleared."""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    return value
