"""Модели «Трещины» (app_cracks).

CrackIdentification — одна строка обследования дефектов из Excel: положение
(пикетаж «от/до», отметка RL), тип дефекта, размеры в мм и тайм-коды в
видеозаписи обследования. Все записи проекта заменяются целиком при каждом
импорте.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class CrackIdentification(models.Model):
    project = models.ForeignKey(
        "app_projects.Project",
        on_delete=models.CASCADE,
        related_name="cracks",
        verbose_name=_("Проект"),
    )
    block = models.ForeignKey(
        "app_projects.Block",
        on_delete=models.CASCADE,
        related_name="cracks",
        verbose_name=_("Блок"),
    )
    chainage_from = models.TextField(
        _("Пикетаж от"),
        null=True,
        blank=True,
        help_text=_("Свободный текст, не разбирается как число."),
    )
    chainage_to = models.TextField(
        _("Пикетаж до"),
        null=True,
        blank=True,
    )
    rl = models.FloatField(_("Отметка RL"), null=True, blank=True)
    defect_type = models.TextField(
        _("Тип дефекта"),
        null=True,
        blank=True,
    )
    length_mm = models.FloatField(_("Длина, мм"), null=True, blank=True)
    width_mm = models.FloatField(_("Ширина, мм"), null=True, blank=True)
    height_mm = models.FloatField(_("Высота, мм"), null=True, blank=True)
    video_file_name = models.TextField(
        _("Видеофайл"),
        null=True,
        blank=True,
    )
    # Канонический формат HH:MM:SS (часы не ограничены); оба поля заданы или оба пусты
    start_time = models.TextField(_("Начало"), null=True, blank=True)
    end_time = models.TextField(_("Конец"), null=True, blank=True)

    class Meta:
        verbose_name = _("Трещина")
        verbose_name_plural = _("Трещины")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["project", "block"], name="crack_project_block_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.defect_type or '—'} ({self.chainage_from or '?'}–{self.chainage_to or '?'})"
