"""
Employee serializers for the Bank Records API.
"""

from rest_framework import serializers

from apps.core.serializers import (
    BIGINT_MAX,
    INT_MAX,
    AddressSerializer,
    validate_not_future,
)


class EmployeeSerializer(serializers.Serializer):
    """Employee profile, used for profile completion, update and output."""

    id = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    name = serializers.CharField(max_length=150, required=True)
    salary = serializers.IntegerField(min_value=1, max_value=INT_MAX, required=True)
    title = serializers.CharField(max_length=100, required=True)
    address = AddressSerializer(source='*', required=False)
    joining_date = serializers.DateField(
        required=False,
        allow_null=True,
        validators=[validate_not_future],
    )
    email = serializers.CharField(read_only=True)
    role = serializers.CharField(read_only=True)
