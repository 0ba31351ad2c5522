"""
Customer serializers for the Bank Records API.
"""

from rest_framework import serializers

from apps.core.serializers import BIGINT_MAX, AddressSerializer, validate_future


class BranchSerializer(serializers.Serializer):
    """Home branch of the customer's account."""

    name = serializers.CharField(source='branch_name', max_length=100)
    code = serializers.IntegerField(source='branch_code', min_value=1, max_value=BIGINT_MAX)
    ifsc = serializers.CharField(source='branch_ifsc', max_length=20)


class CardSerializer(serializers.Serializer):
    """Card issued against the customer's account."""

    card_number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX)
    credit_limit = serializers.IntegerField(
        source='card_credit_limit',
        min_value=1,
        max_value=BIGINT_MAX,
    )
    expiry_date = serializers.DateField(
        source='card_expiry_date',
        validators=[validate_future],
    )


class CustomerSerializer(serializers.Serializer):
    """
    Customer profile, used for profile completion, update and output.

    Login identifier, credential and role are never read from the payload.
    """

    id = serializers.IntegerField(
        min_value=1,
        max_value=BIGINT_MAX,
        required=True,
        help_text="Customer id returned at registration.",
    )
    name = serializers.CharField(max_length=150, required=True)
    account_number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    branch = BranchSerializer(source='*', required=False)
    account_type = serializers.CharField(max_length=50, required=True)
    contact_number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    card = CardSerializer(source='*', required=False)
    pan_number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    address = AddressSerializer(source='*', required=False)
    email = serializers.CharField(read_only=True)
