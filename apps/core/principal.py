"""
The authenticated actor performing a request.

A ``Principal`` is built once per request by the authentication class and
handed explicitly to every ownership check and service call.
"""

from dataclasses import dataclass

from django.db import models


class Role(models.TextChoices):
    """Closed set of account roles. MANAGER extends EMPLOYEE."""

    CUSTOMER = 'ROLE_CUSTOMER', 'Customer'
    EMPLOYEE = 'ROLE_EMPLOYEE', 'Employee'
    MANAGER = 'ROLE_MANAGER', 'Manager'


EMPLOYEE_ROLES = frozenset({Role.EMPLOYEE, Role.MANAGER})


@dataclass(frozen=True)
class Principal:
    """Identity, login identifier, credential hash and role of an account."""

    id: int
    email: str
    credential: str
    role: Role

    # DRF permission classes check request.user.is_authenticated
    is_authenticated = True
    is_anonymous = False

    @classmethod
    def from_account(cls, account) -> 'Principal':
        """Build a principal from a Customer or Employee record."""
        return cls(
            id=account.pk,
            email=account.email,
            credential=account.password,
            role=Role(account.role),
        )

    @property
    def is_customer(self) -> bool:
        return self.role == Role.CUSTOMER

    @property
    def is_employee(self) -> bool:
        return self.role in EMPLOYEE_ROLES

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER

    def __str__(self):
        return f"{self.email} ({self.role.label})"
