"""
Offering views for the Bank Records API.
"""

import logging

from rest_framework import status
from rest_framework.views import APIView

from apps.core.permissions import IsCustomer
from apps.core.responses import envelope
from apps.offerings.serializers import OfferingSerializer
from apps.offerings.services import OfferingService

logger = logging.getLogger(__name__)


class OfferingView(APIView):
    """
    POST/GET/PUT/DELETE /api/v1/customers/<customer_id>/offerings

    Only the customer who owns the offering may reach it.
    """

    permission_classes = [IsCustomer]

    def post(self, request, customer_id):
        serializer = OfferingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        offering = OfferingService.create(
            request.user, customer_id, serializer.validated_data
        )

        return envelope(
            'Offering details successfully added',
            data=OfferingSerializer(offering).data,
            status=status.HTTP_201_CREATED,
        )

    def get(self, request, customer_id):
        offering = OfferingService.get(request.user, customer_id)
        return envelope(
            'Offering details successfully retrieved',
            data=OfferingSerializer(offering).data,
        )

    def put(self, request, customer_id):
        # Refused with 501 once ownership passes
        offering = OfferingService.update(request.user, customer_id, request.data)
        return envelope(
            'Offering details successfully updated',
            data=OfferingSerializer(offering).data,
        )

    def delete(self, request, customer_id):
        OfferingService.delete(request.user, customer_id)
        return envelope('Offering details successfully removed')
