"""
Locker views for the Bank Records API.
"""

import logging

from rest_framework import status
from rest_framework.views import APIView

from apps.core.permissions import IsCustomer
from apps.core.responses import envelope
from apps.lockers.serializers import LockerSerializer
from apps.lockers.services import LockerService

logger = logging.getLogger(__name__)


class LockerListView(APIView):
    """
    POST/GET /api/v1/customers/<customer_id>/offerings/lockers
    """

    permission_classes = [IsCustomer]

    def post(self, request, customer_id):
        serializer = LockerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        number = LockerService.create(
            request.user, customer_id, serializer.validated_data
        )

        return envelope(
            'Locker details successfully added',
            data=number,
            status=status.HTTP_201_CREATED,
        )

    def get(self, request, customer_id):
        lockers = LockerService.list_for_customer(request.user, customer_id)
        return envelope(
            'Locker details successfully retrieved',
            data=LockerSerializer(lockers, many=True).data,
        )


class LockerDetailView(APIView):
    """
    GET/PUT/DELETE /api/v1/customers/<customer_id>/offerings/lockers/<number>
    """

    permission_classes = [IsCustomer]

    def get(self, request, customer_id, number):
        locker = LockerService.get(request.user, customer_id, number)
        return envelope(
            'Locker details successfully retrieved',
            data=LockerSerializer(locker).data,
        )

    def put(self, request, customer_id, number):
        serializer = LockerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        locker = LockerService.update(
            request.user, customer_id, number, serializer.validated_data
        )

        return envelope(
            'Locker details successfully updated',
            data=LockerSerializer(locker).data,
        )

    def delete(self, request, customer_id, number):
        LockerService.delete(request.user, customer_id, number)
        return envelope('Locker details successfully removed')
