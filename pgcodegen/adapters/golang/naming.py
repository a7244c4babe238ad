"""Go identifier naming for generated types."""

from __future__ import annotations

from collections.abc import Mapping


def struct_name(name: str, rename: Mapping[str, str] | None = None) -> str:
    """Convert a snake_case SQL name to an exported Go struct name.

    Args:
        name: SQL name, e.g. ``billing_status``
        rename: Explicit overrides keyed by SQL name

    Returns:
        Go struct name

    Examples:
        >>> struct_name("billing_status")
        'BillingStatus'
        >>> struct_name("user_id")
        'UserID'
        >>> struct_name("status", {"status": "State"})
        'State'
    """
    if rename and rename.get(name):
        return rename[name]

    out = []
    for part in name.split("_"):
        if part == "id":
            out.append("ID")
        else:
            # Only the first rune is upper-cased; the rest keeps its case
            out.append(part[:1].upper() + part[1:])
    return "".join(out)
