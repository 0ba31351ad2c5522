"""
Employee views for the Bank Records API.
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.core.permissions import IsEmployee, IsManager, MethodPermissionsMixin
from apps.core.responses import envelope
from apps.core.serializers import UserSerializer
from apps.employees.serializers import EmployeeSerializer
from apps.employees.services import EmployeeService

logger = logging.getLogger(__name__)


class RegisterEmployeeView(APIView):
    """
    POST /api/v1/employees/register

    Create a bare employee account from an email and password.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employee_id = EmployeeService.register(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )

        return envelope(
            'Employee account successfully created',
            data=employee_id,
            status=status.HTTP_201_CREATED,
        )


class EmployeeListView(MethodPermissionsMixin, APIView):
    """
    POST /api/v1/employees: complete an employee profile.
    GET  /api/v1/employees: list every employee (managers only).
    """

    method_permission_classes = {
        'POST': [IsEmployee],
        'GET': [IsManager],
    }

    def post(self, request):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employee = EmployeeService.save(request.user, serializer.validated_data)

        return envelope(
            'Employee details successfully added',
            data=EmployeeSerializer(employee).data,
            status=status.HTTP_201_CREATED,
        )

    def get(self, request):
        employees = EmployeeService.list_all()
        return envelope(
            'Employee details successfully retrieved',
            data=EmployeeSerializer(employees, many=True).data,
        )


class EmployeeDetailView(APIView):
    """
    GET/PUT/DELETE /api/v1/employees/<employee_id>
    """

    permission_classes = [IsEmployee]

    def get(self, request, employee_id):
        employee = EmployeeService.get(request.user, employee_id)
        return envelope(
            'Employee details successfully retrieved',
            data=EmployeeSerializer(employee).data,
        )

    def put(self, request, employee_id):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employee = EmployeeService.update(
            request.user, employee_id, serializer.validated_data
        )

        return envelope(
            'Employee details successfully updated',
            data=EmployeeSerializer(employee).data,
        )

    def delete(self, request, employee_id):
        EmployeeService.delete(request.user, employee_id)
        return envelope('Employee details successfully removed')
