from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CutoffRecord",
            fields=[
                ("sno", models.IntegerField(primary_key=True, serialize=False)),
                ("inst_code", models.CharField(max_length=20)),
                ("institute_name", models.CharField(max_length=255)),
                ("place", models.CharField(blank=True, default="", max_length=100)),
                ("dist_code", models.CharField(max_length=10)),
                ("co_education", models.CharField(blank=True, choices=[("COED", "Co-Education"), ("GIRLS", "Girls Only")], default="", max_length=10)),
                ("college_type", models.CharField(blank=True, default="", max_length=20)),
                ("year", models.IntegerField(blank=True, null=True)),
                ("branch_code", models.CharField(max_length=20)),
                ("branch_name", models.CharField(max_length=255)),
                ("oc_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("oc_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_a_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_a_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_b_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_b_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_c_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_c_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_d_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_d_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_e_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("bc_e_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("sc_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("sc_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("st_boys", models.PositiveIntegerField(blank=True, null=True)),
                ("st_girls", models.PositiveIntegerField(blank=True, null=True)),
                ("ews_girls_ou", models.PositiveIntegerField(blank=True, null=True)),
                ("tuition_fee", models.IntegerField(blank=True, null=True)),
                ("affiliated_to", models.CharField(blank=True, default="", max_length=50)),
            ],
            options={
                "db_table": "ts_bpharmacy_2024",
                "ordering": ["sno"],
                "indexes": [models.Index(fields=["dist_code", "branch_code"], name="cutoff_dist_branch_idx")],
                "unique_together": {("inst_code", "branch_code", "year")},
            },
        ),
    ]
