from rest_framework import serializers


class CrackImportFileSerializer(serializers.Serializer):
    """Файл листа обследования (multipart, поле file)"""

    file = serializers.FileField(
        required=True,
        allow_empty_file=False,
        help_text="Excel файл (.xlsx) с листом обследования трещин",
    )


class CrackImportErrorSerializer(serializers.Serializer):
    row = serializers.IntegerField(help_text="Номер строки в листе (заголовок — 1)")
    error = serializers.CharField()


class CrackImportResultSerializer(serializers.Serializer):
    """Результат импорта трещин"""

    deleted = serializers.IntegerField(help_text="Удалено прежних записей проекта")
    imported = serializers.IntegerField(help_text="Создано записей")
    errors = CrackImportErrorSerializer(many=True)
    processedRows = serializers.IntegerField(help_text="Просмотрено строк до остановки")
    totalRows = serializers.IntegerField(help_text="Строк данных в листе")
