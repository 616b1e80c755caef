from rest_framework import serializers


class ProjectSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    clientName = serializers.CharField(source="client_name", allow_blank=True)
    location = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    designImage = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    def get_designImage(self, obj):
        return obj.design_image.url if obj.design_image else None


class ProjectWriteSerializer(serializers.Serializer):
    """JSON или multipart; обязательность name/clientName проверяет сервис"""

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    clientName = serializers.CharField(required=False, allow_blank=True, max_length=255)
    location = serializers.CharField(required=False, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    designImageFile = serializers.FileField(required=False)
