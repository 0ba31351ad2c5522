"""
Account lookups across the shared login-identifier space.

Customers and employees live in separate tables but share one namespace
of login identifiers.
"""

from typing import Optional

from apps.core.exceptions import EmailAlreadyRegisteredError, InvalidEmailAddressError
from apps.core.principal import Principal
from apps.core.validators import is_valid_login_identifier
from apps.customers.models import Customer
from apps.employees.models import Employee


def find_account(email: str):
    """
    Return the Customer or Employee holding ``email``, or None.

    Employees are looked up first.
    """
    employee = Employee.objects.filter(email=email).first()
    if employee is not None:
        return employee
    return Customer.objects.filter(email=email).first()

def resolve_principal(email: str) -> Optional[Principal]:
    """Build the principal for ``email``, or None when no account holds it."""
    account = find_account(email)
    if account is None:
        return None
    return Principal.from_account(account)

def login_identifier_in_use(email: str) -> bool:
    """True when either a customer or an employee already uses ``email``."""
    return (
        Customer.objects.filter(email=email).exists()
        or Employee.objects.filter(email=email).exists()
    )

def ensure_registrable(email: str) -> None:
    """
    Check that ``email`` may be used for a new account.

    Raises:
        InvalidEmailAddressError: If the identifier is malformed.
        EmailAlreadyRegisteredError: If a customer or employee already uses it.
    """
    if not is_valid_login_identifier(email):
        raise InvalidEmailAddressError()
    if login_identifier_in_use(email):
        raise EmailAlreadyRegisteredError()
