"""Normalizers applied to raw environment values before Settings validation."""


def normalize_choice(value, *, upper: bool = False):
    """
    Strip and case-fold an enum-like setting ("debug " -> "DEBUG" with upper=True).

    Non-string values are returned untouched so pydantic reports them.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    return value.upper() if upper else value.lower()


def normalize_url_prefix(value: str) -> str:
    """
    "/api/v1", "api/v1/" -> "/api/v1"; "", "/" -> "" (mount at the root).
    """
    value = "/" + value.strip().strip("/")
    return "" if value == "/" else value
