from rest_framework import serializers
from .models import User


# =============================================================================
# Input Serializers
# =============================================================================

class UserNameInputSerializer(serializers.Serializer):
    """Body of POST /users and PATCH /users/:id."""

    name = serializers.CharField(max_length=100)


class PinLoginInputSerializer(serializers.Serializer):
    """
    Body of POST /users/login.

    Fields:
        pin (str): The PIN typed on the pad
        userId (int): Optional; required while several users share the default PIN
    """

    # No length limit: a wrong-length PIN is a failed login, not a malformed request
    pin = serializers.CharField(trim_whitespace=False)
    userId = serializers.IntegerField(source='user_id', required=False)


class ResetPinInputSerializer(serializers.Serializer):
    """Body of POST /users/:id/reset-pin. Format rules live in the service."""

    newPin = serializers.CharField(source='new_pin', max_length=4, allow_blank=True)
    confirmPin = serializers.CharField(source='confirm_pin', max_length=4, required=False)


class AdminLoginInputSerializer(serializers.Serializer):
    """Body of POST /admin/login."""

    password = serializers.CharField(trim_whitespace=False)


# =============================================================================
# Output Serializers
# =============================================================================

class UserSerializer(serializers.ModelSerializer):
    """Public user representation; the PIN is never exposed."""

    mustResetPin = serializers.BooleanField(source='must_reset_pin', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'mustResetPin']
        read_only_fields = fields


class PinLoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = UserSerializer(required=False)
    mustResetPin = serializers.BooleanField(required=False)
    message = serializers.CharField(required=False)
    errors = serializers.DictField(required=False)


class AdminLoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    token = serializers.CharField(required=False)
    message = serializers.CharField(required=False)
