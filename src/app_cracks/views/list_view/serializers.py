from rest_framework import serializers


class CrackBlockSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class CrackSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    projectId = serializers.IntegerField(source="project_id")
    blockId = serializers.IntegerField(source="block_id")
    block = CrackBlockSerializer()
    chainageFrom = serializers.CharField(source="chainage_from", allow_null=True)
    chainageTo = serializers.CharField(source="chainage_to", allow_null=True)
    rl = serializers.FloatField(allow_null=True)
    defectType = serializers.CharField(source="defect_type", allow_null=True)
    lengthMm = serializers.FloatField(source="length_mm", allow_null=True)
    widthMm = serializers.FloatField(source="width_mm", allow_null=True)
    heightMm = serializers.FloatField(source="height_mm", allow_null=True)
    videoFileName = serializers.CharField(source="video_file_name", allow_null=True)
    startTime = serializers.CharField(source="start_time", allow_null=True)
    endTime = serializers.CharField(source="end_time", allow_null=True)


class CrackPageSerializer(serializers.Serializer):
    items = CrackSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pageSize = serializers.IntegerField()


class CrackDeleteResultSerializer(serializers.Serializer):
    deleted = serializers.IntegerField()
