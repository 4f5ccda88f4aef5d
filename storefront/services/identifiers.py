"""Path/query identifier parsing. Unusable ids are reported as 404, never as 500."""

from storefront.core.errors import NotFoundError

# Primary keys are 32-bit signed integers in PostgreSQL.
MAX_ID = 2_147_483_647


def parse_id(raw: str | int | None, entity: str) -> int:
    """Return raw as a primary key or raise NotFoundError("<entity> not found")."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and raw.isascii() and raw.isdigit():
        value = int(raw)
    else:
        raise NotFoundError(f"{entity} not found")
    if not 1 <= value <= MAX_ID:
        raise NotFoundError(f"{entity} not found")
    return value
