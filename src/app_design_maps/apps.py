from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AppDesignMapsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "app_design_maps"
    verbose_name = _("Карты чертежа")
