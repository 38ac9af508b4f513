import pytest

from cutoffs.models import CutoffRecord


def make_record(sno, **fields):
    values = {
        "inst_code": f"INST{sno}",
        "institute_name": f"College {sno}",
        "place": "Hyderabad",
        "dist_code": "HYD",
        "co_education": CutoffRecord.COED,
        "year": 2024,
        "branch_code": "PHM",
        "branch_name": "B.Pharmacy",
    }
    values.update(fields)
    return CutoffRecord(sno=sno, **values)


@pytest.fixture
def cutoff_rows(db):
    rows = [
        make_record(1, inst_code="AAA", branch_code="CE", branch_name="Civil", oc_boys=100, sc_boys=900),
        make_record(2, inst_code="BBB", branch_code="ME", branch_name="Mechanical", oc_boys=50, sc_boys=700),
        make_record(3, inst_code="CCC", branch_code="CE", branch_name="Civil", oc_boys=50),
        make_record(4, inst_code="DDD", branch_code="EE", branch_name="Electrical", oc_boys=75, sc_boys=300),
        make_record(5, inst_code="EEE", branch_code="ME", branch_name="Mechanical", dist_code="WGL",
                    co_education=CutoffRecord.GIRLS, oc_boys=60, oc_girls=80),
        make_record(6, inst_code="FFF", branch_code="ME", branch_name="Mechanical", oc_boys=5000),
    ]
    return CutoffRecord.objects.bulk_create(rows)
