"""Field differ: which fields differ between two versions of a content object.

Versions are compared field by field on their values.  A field present on
one side only counts as changed.  Records may be mappings, dataclasses, or
plain objects (compared through their instance ``__dict__``).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping

from sweep.rules.classifier import ChangeSet

_MISSING = object()


def diff_fields(old: object, new: object) -> ChangeSet:
    """Compare two versions and return the names of the changed fields.

    Algorithm:
        1. Read both versions into ``{field: value}`` mappings.
        2. Walk the union of field names in a stable order.
        3. A field changed when its values differ by ``!=`` or it is
           missing on one side.

    """
    old_values = field_values(old)
    new_values = field_values(new)

    changed: list[str] = []
    for name in sorted(old_values.keys() | new_values.keys()):
        if old_values.get(name, _MISSING) != new_values.get(name, _MISSING):
            changed.append(name)
    return ChangeSet.of(changed)


def field_values(record: object) -> Mapping[str, object]:
    """Read a version record as a mapping of field name to value."""
    if isinstance(record, Mapping):
        return record
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    try:
        return vars(record)
    except TypeError:
        msg = f"Cannot read fields from {type(record).__name__!r}"
        raise TypeError(msg) from None
