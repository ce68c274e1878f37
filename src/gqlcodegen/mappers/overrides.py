"""Ordered lookup of user supplied overrides (custom types, custom annotations).

An override can be keyed by `Parent.field` or by the schema type name. The keys are tried
in order and the first one present in the mapping wins.
"""

from collections.abc import Callable, Mapping, Sequence

OverrideKey = Callable[[str, str | None, str | None], str | None]


def field_override_key(type_name: str, field_name: str | None, parent_type_name: str | None) -> str | None:
    if field_name is None or parent_type_name is None:
        return None
    return f"{parent_type_name}.{field_name}"


def type_override_key(type_name: str, field_name: str | None, parent_type_name: str | None) -> str | None:
    return type_name


OVERRIDE_KEYS: tuple[OverrideKey, ...] = (field_override_key, type_override_key)


def lookup_override(
    mapping: Mapping[str, str] | None,
    type_name: str,
    field_name: str | None = None,
    parent_type_name: str | None = None,
    keys: Sequence[OverrideKey] = OVERRIDE_KEYS,
) -> str | None:
    """
    Find the override that applies to a (possibly field-level) type reference.

    Args:
        mapping: User supplied overrides
        type_name: Innermost schema type name of the reference
        field_name: Name of the field (or argument) holding the reference, if any
        parent_type_name: Name of the type declaring that field, if any
        keys: Key builders, tried in order

    Returns:
        The first matching override, or None.
    """
    if not mapping:
        return None
    for key_of in keys:
        key = key_of(type_name, field_name, parent_type_name)
        if key is not None and key in mapping:
            return mapping[key]
    return None
