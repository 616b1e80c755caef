from rest_framework import serializers


class BlockSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    projectId = serializers.IntegerField(source="project_id")


class BlockCreateSerializer(serializers.Serializer):
    projectId = serializers.IntegerField(min_value=1)
    name = serializers.CharField(max_length=255, trim_whitespace=True)
