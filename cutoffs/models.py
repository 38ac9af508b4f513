# models.py
from django.db import models

# One nullable rank column per (caste category x gender) combination.
RANK_COLUMNS = (
    "oc_boys", "oc_girls",
    "bc_a_boys", "bc_a_girls",
    "bc_b_boys", "bc_b_girls",
    "bc_c_boys", "bc_c_girls",
    "bc_d_boys", "bc_d_girls",
    "bc_e_boys", "bc_e_girls",
    "sc_boys", "sc_girls",
    "st_boys", "st_girls",
    "ews_girls_ou",
)

IDENTITY_FIELDS = (
    "sno", "inst_code", "institute_name", "place", "dist_code",
    "branch_code", "branch_name", "co_education",
)


class CutoffRecord(models.Model):
    COED = "COED"
    GIRLS = "GIRLS"
    CO_EDUCATION_CHOICES = [
        (COED, "Co-Education"),
        (GIRLS, "Girls Only"),
    ]

    sno = models.IntegerField(primary_key=True)
    inst_code = models.CharField(max_length=20)
    institute_name = models.CharField(max_length=255)
    place = models.CharField(max_length=100, blank=True, default="")
    dist_code = models.CharField(max_length=10)
    co_education = models.CharField(max_length=10, choices=CO_EDUCATION_CHOICES, blank=True, default="")
    college_type = models.CharField(max_length=20, blank=True, default="")
    year = models.IntegerField(null=True, blank=True)
    branch_code = models.CharField(max_length=20)
    branch_name = models.CharField(max_length=255)

    # Closing ranks; NULL means no rank was published for the category.
    oc_boys = models.PositiveIntegerField(null=True, blank=True)
    oc_girls = models.PositiveIntegerField(null=True, blank=True)
    bc_a_boys = models.PositiveIntegerField(null=True, blank=True)
    bc_a_girls = models.PositiveIntegerField(null=True, blank=True)
    bc_b_boys = models.PositiveIntegerField(null=True, blank=True)
    bc_b_girls = models.PositiveIntegerField(null=True, blank=True)
    bc_c_boys = models.PositiveIntegerField(null=True, blank=True)
    bc_c_girls = models.PositiveIntegerField(null=True, blank=True)
    bc_d_boys = models.PositiveIntegerField(null=True, blank=True)
    bc_d_girls = models.PositiveIntegerField(null=True, blank=True)
    bc_e_boys = models.PositiveIntegerField(null=True, blank=True)
    bc_e_girls = models.PositiveIntegerField(null=True, blank=True)
    sc_boys = models.PositiveIntegerField(null=True, blank=True)
    sc_girls = models.PositiveIntegerField(null=True, blank=True)
    st_boys = models.PositiveIntegerField(null=True, blank=True)
    st_girls = models.PositiveIntegerField(null=True, blank=True)
    ews_girls_ou = models.PositiveIntegerField(null=True, blank=True)

    tuition_fee = models.IntegerField(null=True, blank=True)
    affiliated_to = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        db_table = "ts_bpharmacy_2024"
        unique_together = ("inst_code", "branch_code", "year")
        ordering = ["sno"]
        indexes = [
            models.Index(fields=["dist_code", "branch_code"], name="cutoff_dist_branch_idx"),
        ]

    def __str__(self):
        return f"{self.inst_code} - {self.institute_name} ({self.branch_code})"
