"""Модели «Карты чертежа» (app_design_maps).

DesignMap — прямоугольник на изображении чертежа проекта (в пикселях
исходного изображения), привязанный ровно к одной трещине того же проекта.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class DesignMap(models.Model):
    project = models.ForeignKey(
        "app_projects.Project",
        on_delete=models.CASCADE,
        related_name="design_maps",
        verbose_name=_("Проект"),
    )
    crack = models.OneToOneField(
        "app_cracks.CrackIdentification",
        on_delete=models.CASCADE,
        related_name="design_map",
        verbose_name=_("Трещина"),
        help_text=_("У трещины может быть не больше одной карты."),
    )
    x = models.FloatField(_("X"))
    y = models.FloatField(_("Y"))
    width = models.FloatField(_("Ширина"))
    height = models.FloatField(_("Высота"))
    created_at = models.DateTimeField(_("Создана"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Изменена"), auto_now=True)

    class Meta:
        verbose_name = _("Карта чертежа")
        verbose_name_plural = _("Карты чертежа")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"#{self.pk} → crack {self.crack_id}"
