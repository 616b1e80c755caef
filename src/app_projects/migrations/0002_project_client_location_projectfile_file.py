from django.db import migrations, models

import app_projects.models


class Migration(migrations.Migration):
    dependencies = [
        ("app_projects", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="project",
            name="client_name",
            field=models.CharField(blank=True, default="", max_length=255, verbose_name="Заказчик"),
        ),
        migrations.AddField(
            model_name="project",
            name="location",
            field=models.CharField(
                blank=True, default="", max_length=255, verbose_name="Местоположение"
            ),
        ),
        migrations.RemoveField(
            model_name="projectfile",
            name="filename",
        ),
        migrations.AddField(
            model_name="projectfile",
            name="file",
            field=models.FileField(
                default="",
                help_text="Хранится как projects/<id проекта>/files/<мс>-<uuid><расширение>.",
                max_length=255,
                upload_to=app_projects.models.project_file_upload_to,
                verbose_name="Файл",
            ),
            preserve_default=False,
        ),
    ]
