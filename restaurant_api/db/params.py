from __future__ import annotations

# SQLite INTEGER range; larger ids are bound as text so they never overflow.
_MAX_INTEGER = 2**63 - 1
_MIN_INTEGER = -(2**63)


def flag_values(value: bool | None) -> tuple[int | None, str | None]:
    """Bind values for ``<flag> IN (?, ?)``.

    Flags may be stored as INTEGER 0/1 or as the text 'true'/'false', so a
    parsed boolean matches either encoding. ``None`` binds NULL twice and
    matches nothing.
    """
    if value is None:
        return (None, None)
    return (int(value), "true" if value else "false")


def row_id(raw: str) -> int | str:
    value = int(raw)
    if _MIN_INTEGER <= value <= _MAX_INTEGER:
        return value
    return raw
