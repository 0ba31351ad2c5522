"""
Ownership validation.

Decides whether a principal may act on a specific customer, employee,
offering, loan or locker. Decisions are computed from current store state
on every call and never cached; callers re-check existence when they
load the record for use.

Loan and locker checks answer DENIED, never NOT_FOUND, so that a customer
cannot probe for numbers that belong to someone else's offering. Employee
lookups do answer NOT_FOUND for a missing record; that asymmetry is kept
as-is and documented in DESIGN.md.
"""

import enum
import logging
from typing import Optional

from apps.core.exceptions import (
    EmployeeNotFoundError,
    UnauthorizedCustomerError,
    UnauthorizedEmployeeError,
)
from apps.core.principal import Principal
from apps.customers.models import Customer
from apps.employees.models import Employee
from apps.loans.models import Loan
from apps.lockers.models import Locker
from apps.offerings.models import Offering

logger = logging.getLogger(__name__)


class Decision(enum.Enum):
    OK = 'ok'
    DENIED = 'denied'
    NOT_FOUND = 'not_found'


class ResourceKind(enum.Enum):
    CUSTOMER = 'customer'
    EMPLOYEE = 'employee'
    OFFERING = 'offering'
    LOAN = 'loan'
    LOCKER = 'locker'


class OwnershipValidator:
    """Pure decision functions over the current store state."""

    @classmethod
    def authorize(
        cls,
        principal: Principal,
        kind: ResourceKind,
        resource_id: int,
        number: Optional[int] = None,
    ) -> Decision:
        """
        Decide whether ``principal`` may act on a resource.

        Args:
            principal: The acting principal.
            kind: The resource type.
            resource_id: Customer id for customer, offering, loan and locker
                resources; employee id for employee resources.
            number: Unique loan/locker number (offering-scoped kinds only).

        Returns:
            Decision.OK, Decision.DENIED or Decision.NOT_FOUND.
        """
        if kind is ResourceKind.CUSTOMER or kind is ResourceKind.OFFERING:
            return cls._authorize_customer(principal, resource_id)
        if kind is ResourceKind.EMPLOYEE:
            return cls._authorize_employee(principal, resource_id)
        if kind is ResourceKind.LOAN:
            return cls._authorize_offering_child(principal, resource_id, Loan, number)
        if kind is ResourceKind.LOCKER:
            return cls._authorize_offering_child(principal, resource_id, Locker, number)
        raise ValueError(f"Unknown resource kind: {kind!r}")

    @classmethod
    def enforce(
        cls,
        principal: Principal,
        kind: ResourceKind,
        resource_id: int,
        number: Optional[int] = None,
    ) -> None:
        """
        Same decision as :meth:`authorize`, raising on anything but OK.

        Raises:
            UnauthorizedEmployeeError / EmployeeNotFoundError: employee kind.
            UnauthorizedCustomerError: every other kind.
        """
        decision = cls.authorize(principal, kind, resource_id, number)
        if decision is Decision.OK:
            return

        logger.info(
            "Ownership check %s for %s on %s %s%s",
            decision.value,
            principal.email,
            kind.value,
            resource_id,
            f" #{number}" if number is not None else '',
        )

        if kind is ResourceKind.EMPLOYEE:
            if decision is Decision.NOT_FOUND:
                raise EmployeeNotFoundError()
            raise UnauthorizedEmployeeError()
        raise UnauthorizedCustomerError()

    @staticmethod
    def _authorize_customer(principal: Principal, customer_id: int) -> Decision:
        if principal.is_employee:
            return Decision.OK
        if not principal.is_customer:
            return Decision.DENIED

        customer = Customer.objects.filter(pk=customer_id).only('email').first()
        if customer is None or customer.email != principal.email:
            return Decision.DENIED
        return Decision.OK

    @staticmethod
    def _authorize_employee(principal: Principal, employee_id: int) -> Decision:
        if not principal.is_employee:
            return Decision.DENIED

        employee = Employee.objects.filter(pk=employee_id).only('email').first()
        if employee is None:
            return Decision.NOT_FOUND
        if employee.pk != principal.id or employee.email != principal.email:
            return Decision.DENIED
        return Decision.OK

    @classmethod
    def _authorize_offering_child(
        cls,
        principal: Principal,
        customer_id: int,
        model,
        number: Optional[int],
    ) -> Decision:
        if number is None:
            raise ValueError("Offering-scoped checks need a loan/locker number.")

        # (a) the path customer must be accessible and own an offering
        if cls._authorize_customer(principal, customer_id) is not Decision.OK:
            return Decision.DENIED
        offering_id = (
            Offering.objects.filter(customer_id=customer_id)
            .values_list('pk', flat=True)
            .first()
        )
        if offering_id is None:
            return Decision.DENIED

        # (b) the numbered child must sit in that very offering
        child_offering_id = (
            model.objects.filter(number=number)
            .values_list('offering_id', flat=True)
            .first()
        )
        if child_offering_id is None or child_offering_id != offering_id:
            return Decision.DENIED
        return Decision.OK
