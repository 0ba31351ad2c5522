"""
Customer views for the Bank Records API.

Views are thin; all business logic is in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.core.permissions import IsCustomerOrEmployee, IsEmployee, MethodPermissionsMixin
from apps.core.responses import envelope
from apps.core.serializers import UserSerializer
from apps.customers.serializers import CustomerSerializer
from apps.customers.services import CustomerService

logger = logging.getLogger(__name__)


class RegisterCustomerView(APIView):
    """
    POST /api/v1/customers/register

    Create a bare customer account from an email and password.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        """Handle customer account registration."""
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer_id = CustomerService.register(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )

        return envelope(
            'Customer account successfully created',
            data=customer_id,
            status=status.HTTP_201_CREATED,
        )


class CustomerListView(MethodPermissionsMixin, APIView):
    """
    POST /api/v1/customers: complete a customer profile.
    GET  /api/v1/customers: list every customer (employees only).
    """

    method_permission_classes = {
        'POST': [IsCustomerOrEmployee],
        'GET': [IsEmployee],
    }

    def post(self, request):
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = CustomerService.save(request.user, serializer.validated_data)

        return envelope(
            'Customer details successfully added',
            data=CustomerSerializer(customer).data,
            status=status.HTTP_201_CREATED,
        )

    def get(self, request):
        customers = CustomerService.list_all()
        return envelope(
            'Customer details successfully retrieved',
            data=CustomerSerializer(customers, many=True).data,
        )


class CustomerDetailView(APIView):
    """
    GET/PUT/DELETE /api/v1/customers/<customer_id>
    """

    permission_classes = [IsCustomerOrEmployee]

    def get(self, request, customer_id):
        customer = CustomerService.get(request.user, customer_id)
        return envelope(
            'Customer details successfully retrieved',
            data=CustomerSerializer(customer).data,
        )

    def put(self, request, customer_id):
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = CustomerService.update(
            request.user, customer_id, serializer.validated_data
        )

        return envelope(
            'Customer details successfully updated',
            data=CustomerSerializer(customer).data,
        )

    def delete(self, request, customer_id):
        CustomerService.delete(request.user, customer_id)
        return envelope('Customer details successfully removed')
