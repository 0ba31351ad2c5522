"""
Serializers shared by the account apps.
"""

from datetime import date

from rest_framework import serializers

# Largest values the BigInteger and Integer columns can hold
BIGINT_MAX = 2**63 - 1
INT_MAX = 2**31 - 1


class UserSerializer(serializers.Serializer):
    """Registration request: login identifier and credential only."""

    # Format is checked by the service so that a malformed identifier
    # surfaces as its own error kind rather than a field error.
    email = serializers.CharField(
        max_length=254,
        required=True,
        help_text="Login identifier (email address).",
    )
    password = serializers.CharField(
        max_length=128,
        required=True,
        write_only=True,
        trim_whitespace=False,
        help_text="Account credential.",
    )


class AddressSerializer(serializers.Serializer):
    """Postal address, stored flat on the owning account row."""

    street = serializers.CharField(source='address_street', max_length=200)
    state = serializers.CharField(source='address_state', max_length=100)
    city = serializers.CharField(source='address_city', max_length=100)
    pin = serializers.CharField(source='address_pin', max_length=20)


def validate_not_future(value):
    if value is not None and value > date.today():
        raise serializers.ValidationError("Date cannot be in the future.")
    return value


def validate_future(value):
    if value is not None and value <= date.today():
        raise serializers.ValidationError("Date must be in the future.")
    return value
