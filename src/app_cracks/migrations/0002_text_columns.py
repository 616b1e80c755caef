from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("app_cracks", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="crackidentification",
            name="chainage_from",
            field=models.TextField(
                blank=True,
                help_text="Свободный текст, не разбирается как число.",
                null=True,
                verbose_name="Пикетаж от",
            ),
        ),
        migrations.AlterField(
            model_name="crackidentification",
            name="chainage_to",
            field=models.TextField(blank=True, null=True, verbose_name="Пикетаж до"),
        ),
        migrations.AlterField(
            model_name="crackidentification",
            name="defect_type",
            field=models.TextField(blank=True, null=True, verbose_name="Тип дефекта"),
        ),
        migrations.AlterField(
            model_name="crackidentification",
            name="video_file_name",
            field=models.TextField(blank=True, null=True, verbose_name="Видеофайл"),
        ),
        migrations.AlterField(
            model_name="crackidentification",
            name="start_time",
            field=models.TextField(blank=True, null=True, verbose_name="Начало"),
        ),
        migrations.AlterField(
            model_name="crackidentification",
            name="end_time",
            field=models.TextField(blank=True, null=True, verbose_name="Конец"),
        ),
    ]
