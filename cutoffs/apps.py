from django.apps import AppConfig


class CutoffsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cutoffs"
    verbose_name = "TS B.Pharmacy cutoffs"
