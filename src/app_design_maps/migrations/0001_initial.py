import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("app_projects", "0001_initial"),
        ("app_cracks", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DesignMap",
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
                ("x", models.FloatField(verbose_name="X")),
                ("y", models.FloatField(verbose_name="Y")),
                ("width", models.FloatField(verbose_name="Ширина")),
                ("height", models.FloatField(verbose_name="Высота")),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="Создана"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="Изменена"),
                ),
                (
                    "crack",
                    models.OneToOneField(
                        help_text="У трещины может быть не больше одной карты.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="design_map",
                        to="app_cracks.crackidentification",
                        verbose_name="Трещина",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="design_maps",
                        to="app_projects.project",
                        verbose_name="Проект",
                    ),
                ),
            ],
            options={
                "verbose_name": "Карта чертежа",
                "verbose_name_plural": "Карты чертежа",
                "ordering": ["id"],
            },
        ),
    ]
