from rest_framework import serializers
from .models import Platform


class PlatformSerializer(serializers.ModelSerializer):

    class Meta:
        model = Platform
        fields = ['id', 'name', 'account_alias', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
