"""
Offering serializers for the Bank Records API.
"""

from rest_framework import serializers

from apps.loans.serializers import LoanSerializer
from apps.lockers.serializers import LockerSerializer


class OfferingSerializer(serializers.Serializer):
    """
    A customer's offering with its lockers and loans.

    Identity and owner come from the URL and the store, never the payload.
    """

    id = serializers.IntegerField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    lockers = LockerSerializer(many=True, required=True)
    loans = LoanSerializer(many=True, required=True)
