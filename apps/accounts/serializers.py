from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User listing; never exposes the password hash."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'role',
            'password_hint',
            'is_active',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class PasswordResetSerializer(serializers.Serializer):
    """Admin-initiated password reset for another user."""

    new_password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    password_hint = serializers.CharField(max_length=200, required=False, allow_blank=True)

    def validate_new_password(self, value):
        if len(value) < 6:
            raise serializers.ValidationError('Password must be at least 6 characters')
        return value
