from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'external_id', 'email', 'username', 'first_name', 'last_name',
            'phone', 'company', 'bio', 'role', 'display_name', 'is_active', 'created_at',
        ]
        read_only_fields = ['id', 'external_id', 'role', 'is_active', 'created_at']

