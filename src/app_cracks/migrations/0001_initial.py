import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("app_projects", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CrackIdentification",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "chainage_from",
                    models.CharField(
                        blank=True,
                        help_text="Свободный текст, не разбирается как число.",
                        max_length=64,
                        null=True,
                        verbose_name="Пикетаж от",
                    ),
                ),
                (
                    "chainage_to",
                    models.CharField(
                        blank=True, max_length=64, null=True, verbose_name="Пикетаж до"
                    ),
                ),
                ("rl", models.FloatField(blank=True, null=True, verbose_name="Отметка RL")),
                (
                    "defect_type",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        max_length=255,
                        null=True,
                        verbose_name="Тип дефекта",
                    ),
                ),
                (
                    "length_mm",
                    models.FloatField(blank=True, null=True, verbose_name="Длина, мм"),
                ),
                (
                    "width_mm",
                    models.FloatField(blank=True, null=True, verbose_name="Ширина, мм"),
                ),
                (
                    "height_mm",
                    models.FloatField(blank=True, null=True, verbose_name="Высота, мм"),
                ),
                (
                    "video_file_name",
                    models.CharField(
                        blank=True, max_length=255, null=True, verbose_name="Видеофайл"
                    ),
                ),
                (
                    "start_time",
                    models.CharField(
                        blank=True, max_length=16, null=True, verbose_name="Начало"
                    ),
                ),
                (
                    "end_time",
                    models.CharField(
                        blank=True, max_length=16, null=True, verbose_name="Конец"
                    ),
                ),
                (
                    "block",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cracks",
                        to="app_projects.block",
                        verbose_name="Блок",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cracks",
                        to="app_projects.project",
                        verbose_name="Проект",
                    ),
                ),
            ],
            options={
                "verbose_name": "Трещина",
                "verbose_name_plural": "Трещины",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["project", "block"],
                        name="crack_project_block_idx",
                    )
                ],
            },
        ),
    ]
