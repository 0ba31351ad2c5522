"""
Loan views for the Bank Records API.

Views are thin; all business logic is in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.views import APIView

from apps.core.permissions import IsCustomer
from apps.core.responses import envelope
from apps.loans.serializers import LoanSerializer
from apps.loans.services import LoanService

logger = logging.getLogger(__name__)


class LoanListView(APIView):
    """
    POST /api/v1/customers/<customer_id>/offerings/loans
    GET  /api/v1/customers/<customer_id>/offerings/loans
    """

    permission_classes = [IsCustomer]

    def post(self, request, customer_id):
        """Add a loan to the customer's offering."""
        serializer = LoanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        number = LoanService.create(
            request.user, customer_id, serializer.validated_data
        )

        return envelope(
            'Loan details successfully added',
            data=number,
            status=status.HTTP_201_CREATED,
        )

    def get(self, request, customer_id):
        loans = LoanService.list_for_customer(request.user, customer_id)
        return envelope(
            'Loan details successfully retrieved',
            data=LoanSerializer(loans, many=True).data,
        )


class LoanDetailView(APIView):
    """
    GET/PUT/DELETE /api/v1/customers/<customer_id>/offerings/loans/<number>
    """

    permission_classes = [IsCustomer]

    def get(self, request, customer_id, number):
        loan = LoanService.get(request.user, customer_id, number)
        return envelope(
            'Loan details successfully retrieved',
            data=LoanSerializer(loan).data,
        )

    def put(self, request, customer_id, number):
        serializer = LoanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        loan = LoanService.update(
            request.user, customer_id, number, serializer.validated_data
        )

        return envelope(
            'Loan details successfully updated',
            data=LoanSerializer(loan).data,
        )

    def delete(self, request, customer_id, number):
        LoanService.delete(request.user, customer_id, number)
        return envelope('Loan details successfully removed')
