"""
Loan serializers for the Bank Records API.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.serializers import BIGINT_MAX


class LoanSerializer(serializers.Serializer):
    """
    A loan inside an offering.

    ``customer_id`` is optional on input; when given it must name the
    customer that owns the offering.
    """

    number = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=True)
    customer_id = serializers.IntegerField(min_value=1, max_value=BIGINT_MAX, required=False)
    amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=True,
    )
