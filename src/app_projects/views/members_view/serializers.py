from rest_framework import serializers


class MemberUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(source="first_name")
    email = serializers.EmailField()
    role = serializers.CharField()


class MemberSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    userId = serializers.IntegerField(source="user_id")
    user = MemberUserSerializer()


class MembershipSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    projectId = serializers.IntegerField(source="project_id")
    userId = serializers.IntegerField(source="user_id")


class MemberRequestSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1)
