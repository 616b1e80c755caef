from rest_framework import serializers

from core.utils.params import is_finite_number


class CoordinateField(serializers.Field):
    """Координата: только JSON-число (не строка и не bool), конечное."""

    default_error_messages = {"invalid": "A finite number is required."}

    def to_internal_value(self, data):
        if not is_finite_number(data):
            self.fail("invalid")
        return float(data)

    def to_representation(self, value):
        return value


class DesignMapSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    projectId = serializers.IntegerField(source="project_id")
    crackIdentificationId = serializers.IntegerField(source="crack_id")
    x = serializers.FloatField()
    y = serializers.FloatField()
    width = serializers.FloatField()
    height = serializers.FloatField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class DisplayRectSerializer(serializers.Serializer):
    x = serializers.FloatField()
    y = serializers.FloatField()
    width = serializers.FloatField()
    height = serializers.FloatField()


class DesignMapListItemSerializer(DesignMapSerializer):
    """display есть только при переданных naturalWidth/naturalHeight"""

    display = DisplayRectSerializer(required=False)


class DesignMapListSerializer(serializers.Serializer):
    items = DesignMapListItemSerializer(many=True)


class DesignMapCreateSerializer(serializers.Serializer):
    projectId = serializers.IntegerField(min_value=1)
    crackIdentificationId = serializers.IntegerField(min_value=1)
    x = CoordinateField()
    y = CoordinateField()
    width = CoordinateField()
    height = CoordinateField()


class DesignMapUpdateSerializer(serializers.Serializer):
    x = CoordinateField(required=False)
    y = CoordinateField(required=False)
    width = CoordinateField(required=False)
    height = CoordinateField(required=False)
    crackIdentificationId = serializers.IntegerField(min_value=1, required=False)


class DesignMapDeleteSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
