"""
sql.py
- Purpose: Build the SET clause for partial ("PATCH") updates.
"""

from __future__ import annotations

from typing import Any, Mapping

from jobly.core.errors import bad_request
from jobly.core.error_reasons import ErrorReason


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str] | None = None,
) -> tuple[str, list[Any]]:
    """
    Turn {field: new_value, ...} into a SET fragment and its values.

    `js_to_sql` maps a logical field name to its column name, only for
    fields where the two differ:

        >>> sql_for_partial_update({"firstName": "Atlas", "age": "29"}, {"firstName": "first_name"})
        ('"first_name"=$1, "age"=$2', ['Atlas', '29'])

    Placeholders follow the iteration order of `data_to_update`, so a caller
    binding a WHERE value uses `$len(values) + 1`.

    Raises a bad-request AppError when there is nothing to update.
    """
    keys = list(data_to_update)
    if not keys:
        raise bad_request("No data", reason=ErrorReason.NO_DATA)

    renames = js_to_sql or {}
    cols = [f'"{renames.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return ", ".join(cols), [data_to_update[key] for key in keys]
