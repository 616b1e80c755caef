import os

from rest_framework import serializers


class ProjectFileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    projectId = serializers.IntegerField(source="project_id")
    title = serializers.CharField()
    originalName = serializers.CharField(source="original_name")
    filename = serializers.SerializerMethodField()
    mimeType = serializers.CharField(source="mime_type")
    size = serializers.IntegerField()
    uploadedById = serializers.IntegerField(source="uploaded_by_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")

    def get_filename(self, obj) -> str:
        return os.path.basename(obj.file.name)


class ProjectFileUploadSerializer(serializers.Serializer):
    """Форма загрузки: projectId, title, file (multipart)"""

    projectId = serializers.IntegerField(min_value=1)
    title = serializers.CharField(max_length=255)
    file = serializers.FileField(allow_empty_file=True)
