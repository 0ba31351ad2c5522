"""
Employee service layer.

Employees may only act on their own record; listing all employees is a
manager privilege enforced at the view layer.
"""

import logging

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from apps.core.accounts import ensure_registrable
from apps.core.exceptions import (
    EmailAlreadyRegisteredError,
    EmployeeDetailsAlreadyAddedError,
    EmployeeNotFoundError,
    InconsistentDetailsError,
)
from apps.core.ownership import OwnershipValidator, ResourceKind
from apps.core.principal import Principal, Role
from apps.employees.models import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for employee-related operations."""

    @staticmethod
    def register(email: str, password: str) -> int:
        """Create a bare employee account and return its id."""
        ensure_registrable(email)

        try:
            with transaction.atomic():
                employee = Employee.objects.create(
                    email=email,
                    password=make_password(password),
                    role=Role.EMPLOYEE,
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError() from exc

        logger.info("Registered employee account %s (ID: %d)", email, employee.pk)
        return employee.pk

    @staticmethod
    @transaction.atomic
    def save(principal: Principal, validated_data: dict) -> Employee:
        """
        Complete the profile of the principal's own employee record.

        Raises:
            UnauthorizedEmployeeError: Not the principal's own record.
            EmployeeNotFoundError: No employee with this id.
            EmployeeDetailsAlreadyAddedError: Profile already completed.
        """
        employee_id = validated_data['id']
        OwnershipValidator.enforce(principal, ResourceKind.EMPLOYEE, employee_id)

        employee = EmployeeService._locked(employee_id)
        if employee.is_profile_complete:
            raise EmployeeDetailsAlreadyAddedError()

        EmployeeService._apply_profile(employee, validated_data)
        employee.save()

        logger.info("Employee %d profile completed", employee.pk)
        return employee

    @staticmethod
    def list_all() -> list:
        return list(Employee.objects.all())

    @staticmethod
    def get(principal: Principal, employee_id: int) -> Employee:
        OwnershipValidator.enforce(principal, ResourceKind.EMPLOYEE, employee_id)

        employee = Employee.objects.filter(pk=employee_id).first()
        if employee is None:
            raise EmployeeNotFoundError()
        return employee

    @staticmethod
    @transaction.atomic
    def update(principal: Principal, employee_id: int, validated_data: dict) -> Employee:
        """Overwrite profile fields; the body id must match the path id."""
        if employee_id != validated_data['id']:
            raise InconsistentDetailsError()
        OwnershipValidator.enforce(principal, ResourceKind.EMPLOYEE, employee_id)

        employee = EmployeeService._locked(employee_id)
        EmployeeService._apply_profile(employee, validated_data)
        employee.save()

        logger.info("Employee %d updated", employee.pk)
        return employee

    @staticmethod
    @transaction.atomic
    def delete(principal: Principal, employee_id: int) -> None:
        OwnershipValidator.enforce(principal, ResourceKind.EMPLOYEE, employee_id)

        deleted, _ = Employee.objects.filter(pk=employee_id).delete()
        if not deleted:
            raise EmployeeNotFoundError()

        logger.info("Employee %d removed", employee_id)

    @staticmethod
    def _locked(employee_id: int) -> Employee:
        try:
            return Employee.objects.select_for_update().get(pk=employee_id)
        except Employee.DoesNotExist:
            raise EmployeeNotFoundError()

    @staticmethod
    def _apply_profile(employee: Employee, validated_data: dict) -> None:
        for field, value in validated_data.items():
            if field != 'id':
                setattr(employee, field, value)
