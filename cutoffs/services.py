# services.py
import logging

from django.db import DatabaseError

from .exceptions import InvalidInput, StoreUnavailable
from .models import CutoffRecord, RANK_COLUMNS
from .ranking import rank_rows

logger = logging.getLogger(__name__)


def _require_int(name, value):
    if value is None:
        raise InvalidInput(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    return value


def validate_castes(castes):
    if not castes:
        raise InvalidInput("casteColumns must name at least one rank column")
    unknown = [column for column in castes if column not in RANK_COLUMNS]
    if unknown:
        raise InvalidInput(f"Unknown caste columns: {', '.join(unknown)}")
    return list(castes)


def fetch_candidates(branch_codes=None, dist_codes=None, girls_only=False):
    """
    Load every row matching the branch / district / co-education predicates.
    A None list leaves that column unrestricted; an empty list matches nothing.
    """
    try:
        queryset = CutoffRecord.objects.all()
        if branch_codes is not None:
            queryset = queryset.filter(branch_code__in=branch_codes)
        if dist_codes is not None:
            queryset = queryset.filter(dist_code__in=dist_codes)
        if girls_only:
            queryset = queryset.filter(co_education=CutoffRecord.GIRLS)
        return list(queryset.order_by("sno"))
    except DatabaseError as exc:
        logger.exception("Cutoff store query failed: %s", exc)
        raise StoreUnavailable("Cutoff records are unavailable") from exc


def search_by_rank(min_rank, max_rank, caste_columns, branch_codes=None, dist_codes=None, girls_only=False):
    """
    Rows whose every requested caste rank lies in [min_rank, max_rank],
    ordered by the first caste column and then by branch preference.
    """
    min_rank = _require_int("minRank", min_rank)
    max_rank = _require_int("maxRank", max_rank)
    castes = validate_castes(caste_columns)

    records = fetch_candidates(branch_codes, dist_codes, girls_only)
    rows = rank_rows(records, castes, min_rank, max_rank, branch_codes or [])
    logger.debug(
        "Rank search %s-%s on %s: fetched %d, kept %d",
        min_rank, max_rank, castes, len(records), len(rows),
    )
    return rows


def list_cutoffs(limit=50, offset=0):
    if limit < 0 or offset < 0:
        raise InvalidInput("limit and offset must not be negative")
    try:
        return list(CutoffRecord.objects.order_by("sno")[offset:offset + limit])
    except DatabaseError as exc:
        logger.exception("Cutoff store query failed: %s", exc)
        raise StoreUnavailable("Cutoff records are unavailable") from exc


def get_cutoff(sno):
    try:
        return CutoffRecord.objects.filter(sno=sno).first()
    except DatabaseError as exc:
        logger.exception("Cutoff store query failed: %s", exc)
        raise StoreUnavailable("Cutoff records are unavailable") from exc


def cutoffs_for_institutes(inst_codes):
    try:
        return list(CutoffRecord.objects.filter(inst_code__in=inst_codes).order_by("sno"))
    except DatabaseError as exc:
        logger.exception("Cutoff store query failed: %s", exc)
        raise StoreUnavailable("Cutoff records are unavailable") from exc


def filter_options():
    """
    Distinct branches and districts present in the table, for filter controls.
    """
    try:
        branches = list(
            CutoffRecord.objects.values("branch_code", "branch_name")
            .distinct().order_by("branch_code", "branch_name")
        )
        districts = list(
            CutoffRecord.objects.values_list("dist_code", flat=True)
            .distinct().order_by("dist_code")
        )
    except DatabaseError as exc:
        logger.exception("Cutoff store query failed: %s", exc)
        raise StoreUnavailable("Cutoff records are unavailable") from exc
    return {
        "branches": branches,
        "districts": districts,
        "caste_columns": list(RANK_COLUMNS),
    }
