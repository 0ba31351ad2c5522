"""
Locker serializers for the Bank Records API.
"""

from rest_framework import serializers

from apps.core.serializers import BIGINT_MAX


class LockerSerializer(serializers.Serializer):
    """A safe-deposit locker inside an offering."""

    number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    account_number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    branch_code = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
