"""
Rank filter, comparator and projection for cutoff rows.

Every function here is pure: rows go in, new lists come out. Rows may be
``CutoffRecord`` instances or plain mappings keyed by column name.
"""
import math
import sys
from collections.abc import Mapping
from decimal import Decimal

from .exceptions import InvalidInput
from .models import IDENTITY_FIELDS

# Sort position for branches missing from the preference order.
LAST = sys.maxsize


def column_value(record, column):
    if isinstance(record, Mapping):
        return record.get(column)
    return getattr(record, column, None)


def to_rank(value):
    """
    Convert a stored rank to a number, or None when it cannot be read as one.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def filter_by_rank(records, castes, min_rank, max_rank):
    """
    Keep the records whose every requested caste column holds a rank
    within [min_rank, max_rank]. A missing or unreadable value in any one
    column drops the record.
    """
    if not castes:
        raise InvalidInput("casteColumns must name at least one rank column")

    kept = []
    for record in records:
        for column in castes:
            rank = to_rank(column_value(record, column))
            if rank is None or not (min_rank <= rank <= max_rank):
                break
        else:
            kept.append(record)
    return kept


def sort_by_preference(records, primary_column, preference_order):
    """
    Order records by the primary column ascending, then by the position
    of their branch code in ``preference_order``.
    """
    branch_order = {code: index for index, code in enumerate(preference_order or [])}

    def sort_key(record):
        rank = to_rank(column_value(record, primary_column))
        branch = branch_order.get(column_value(record, "branch_code"), LAST)
        # Absent ranks are unreachable after filter_by_rank, which already tested primary_column.
        if rank is None:
            return True, 0, branch
        return False, rank, branch

    return sorted(records, key=sort_key)


def project(record, castes):
    row = {field: column_value(record, field) for field in IDENTITY_FIELDS}
    row["dynamic_castes"] = {column: column_value(record, column) for column in castes}
    return row


def rank_rows(records, castes, min_rank, max_rank, branch_codes):
    kept = filter_by_rank(records, castes, min_rank, max_rank)
    ordered = sort_by_preference(kept, castes[0], branch_codes)
    return [project(record, castes) for record in ordered]
