import sys
from decimal import Decimal
from types import SimpleNamespace

import pytest

from cutoffs.exceptions import InvalidInput
from cutoffs.models import IDENTITY_FIELDS
from cutoffs.ranking import filter_by_rank, project, rank_rows, sort_by_preference, to_rank


def row(sno, branch_code="PHM", **ranks):
    return {"sno": sno, "branch_code": branch_code, **ranks}


class TestToRank:
    def test_numbers_pass_through(self):
        assert to_rank(120) == 120
        assert to_rank(12.5) == 12.5

    def test_decimal_and_numeric_strings(self):
        assert to_rank(Decimal("300")) == 300
        assert to_rank(Decimal("2.5")) == 2.5
        assert to_rank(" 450 ") == 450
        assert to_rank("1e3") == 1000.0

    @pytest.mark.parametrize("value", [None, "", "N/A", "--", True, float("nan"), float("inf"), Decimal("NaN"), object()])
    def test_unreadable_values_are_absent(self, value):
        assert to_rank(value) is None


class TestFilterByRank:
    def test_keeps_rows_with_every_caste_in_range(self):
        rows = [row(1, oc_boys=10, sc_boys=20), row(2, oc_boys=10, sc_boys=500)]
        kept = filter_by_rank(rows, ["oc_boys", "sc_boys"], 1, 100)
        assert [r["sno"] for r in kept] == [1]

    def test_missing_second_caste_excludes_row(self):
        rows = [row(1, oc_boys=50)]
        assert filter_by_rank(rows, ["oc_boys", "sc_boys"], 1, 200) == []

    def test_bounds_are_inclusive(self):
        rows = [row(1, oc_boys=1), row(2, oc_boys=200), row(3, oc_boys=201), row(4, oc_boys=0)]
        kept = filter_by_rank(rows, ["oc_boys"], 1, 200)
        assert [r["sno"] for r in kept] == [1, 2]

    def test_equal_bounds_match_exact_value_only(self):
        rows = [row(1, oc_boys=75, sc_boys=75), row(2, oc_boys=75, sc_boys=76), row(3, oc_boys=74)]
        kept = filter_by_rank(rows, ["oc_boys", "sc_boys"], 75, 75)
        assert [r["sno"] for r in kept] == [1]

    def test_inverted_bounds_match_nothing(self):
        rows = [row(1, oc_boys=50)]
        assert filter_by_rank(rows, ["oc_boys"], 200, 1) == []

    def test_unparseable_value_is_excluded_not_raised(self):
        rows = [row(1, oc_boys="N/A"), row(2, oc_boys="60")]
        kept = filter_by_rank(rows, ["oc_boys"], 1, 100)
        assert [r["sno"] for r in kept] == [2]

    def test_empty_caste_list_is_rejected(self):
        with pytest.raises(InvalidInput):
            filter_by_rank([row(1, oc_boys=1)], [], 1, 10)

    def test_reads_attributes_of_objects(self):
        rows = [SimpleNamespace(sno=1, branch_code="CE", oc_boys=30)]
        assert filter_by_rank(rows, ["oc_boys"], 1, 50) == rows


class TestSortByPreference:
    def test_primary_rank_wins_over_branch_preference(self):
        rows = [row(1, "CE", oc_boys=100), row(2, "ME", oc_boys=50)]
        ordered = sort_by_preference(rows, "oc_boys", ["ME", "CE"])
        assert [r["sno"] for r in ordered] == [2, 1]

        ordered = sort_by_preference(rows, "oc_boys", ["CE", "ME"])
        assert [r["sno"] for r in ordered] == [2, 1]

    def test_ties_follow_branch_preference(self):
        rows = [row(1, "CE", oc_boys=50), row(2, "ME", oc_boys=50)]
        ordered = sort_by_preference(rows, "oc_boys", ["ME", "CE"])
        assert [r["sno"] for r in ordered] == [2, 1]

    def test_unlisted_branch_sorts_after_listed(self):
        rows = [row(1, "XX", oc_boys=50), row(2, "CE", oc_boys=50)]
        ordered = sort_by_preference(rows, "oc_boys", ["ME", "CE"])
        assert [r["sno"] for r in ordered] == [2, 1]

    def test_absent_primary_value_sorts_last(self):
        rows = [row(1, "ME"), row(2, "ME", oc_boys=sys.maxsize - 1), row(3, "ME", oc_boys="bad")]
        ordered = sort_by_preference(rows, "oc_boys", ["ME"])
        assert [r["sno"] for r in ordered] == [2, 1, 3]

    def test_ranks_beyond_maxsize_still_precede_absent_values(self):
        rows = [row(1, "ME"), row(2, "ME", oc_boys=sys.maxsize * 4), row(3, "ME", oc_boys=float("1e30"))]
        ordered = sort_by_preference(rows, "oc_boys", ["ME"])
        assert [r["sno"] for r in ordered] == [2, 3, 1]

    def test_remaining_ties_keep_input_order(self):
        rows = [row(4, "CE", oc_boys=10), row(2, "CE", oc_boys=10), row(9, "CE", oc_boys=10)]
        ordered = sort_by_preference(rows, "oc_boys", ["CE"])
        assert [r["sno"] for r in ordered] == [4, 2, 9]

    def test_does_not_mutate_input(self):
        rows = [row(1, "CE", oc_boys=100), row(2, "ME", oc_boys=50)]
        sort_by_preference(rows, "oc_boys", [])
        assert [r["sno"] for r in rows] == [1, 2]


class TestProjection:
    def test_identity_fields_and_requested_castes_only(self):
        record = {
            "sno": 7, "inst_code": "JNTU", "institute_name": "JNTU College", "place": "Kukatpally",
            "dist_code": "HYD", "branch_code": "PHM", "branch_name": "B.Pharmacy",
            "co_education": "COED", "oc_boys": 120, "oc_girls": 140, "sc_boys": 900,
        }
        projected = project(record, ["sc_boys", "oc_boys"])
        assert set(projected) == set(IDENTITY_FIELDS) | {"dynamic_castes"}
        assert projected["dynamic_castes"] == {"sc_boys": 900, "oc_boys": 120}
        assert projected["inst_code"] == "JNTU"


def test_rank_rows_chains_filter_sort_and_projection():
    rows = [
        row(1, "CE", oc_boys=100, sc_boys=10),
        row(2, "ME", oc_boys=50, sc_boys=10),
        row(3, "CE", oc_boys=50, sc_boys=10),
        row(4, "ME", oc_boys=50),
        row(5, "ME", oc_boys=500, sc_boys=10),
    ]
    result = rank_rows(rows, ["oc_boys", "sc_boys"], 1, 200, ["ME", "CE"])
    assert [r["sno"] for r in result] == [2, 3, 1]
    for r in result:
        assert set(r["dynamic_castes"]) == {"oc_boys", "sc_boys"}
        assert all(1 <= v <= 200 for v in r["dynamic_castes"].values())
