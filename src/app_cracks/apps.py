from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AppCracksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "app_cracks"
    verbose_name = _("Трещины")
