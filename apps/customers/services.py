"""
Customer service layer.

All customer-related business logic resides here. Every operation that
acts on an existing customer takes the acting principal explicitly.
"""

import logging

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from apps.core.accounts import ensure_registrable
from apps.core.exceptions import (
    CustomerDetailsAlreadyAddedError,
    CustomerNotFoundError,
    EmailAlreadyRegisteredError,
    InconsistentDetailsError,
)
from apps.core.ownership import OwnershipValidator, ResourceKind
from apps.core.principal import Principal, Role
from apps.customers.models import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for customer-related operations."""

    @staticmethod
    def register(email: str, password: str) -> int:
        """
        Create a bare customer account.

        Args:
            email: Login identifier; must be well formed and unused by any
                customer or employee.
            password: Raw credential, stored hashed.

        Returns:
            The new customer's id.
        """
        ensure_registrable(email)

        try:
            with transaction.atomic():
                customer = Customer.objects.create(
                    email=email,
                    password=make_password(password),
                    role=Role.CUSTOMER,
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError() from exc

        logger.info("Registered customer account %s (ID: %d)", email, customer.pk)
        return customer.pk

    @staticmethod
    @transaction.atomic
    def save(principal: Principal, validated_data: dict) -> Customer:
        """
        Complete the profile of a registered customer.

        Raises:
            UnauthorizedCustomerError: Principal may not act on this id.
            CustomerNotFoundError: No customer with this id.
            CustomerDetailsAlreadyAddedError: Profile already completed.
        """
        customer_id = validated_data['id']
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        customer = CustomerService._locked(customer_id)
        if customer.is_profile_complete:
            raise CustomerDetailsAlreadyAddedError()

        CustomerService._apply_profile(customer, validated_data)
        customer.save()

        logger.info(
            "Customer %d profile completed by %s", customer.pk, principal.email
        )
        return customer

    @staticmethod
    def list_all() -> list:
        return list(Customer.objects.all())

    @staticmethod
    def get(principal: Principal, customer_id: int) -> Customer:
        """Retrieve a customer the principal may see."""
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        customer = Customer.objects.filter(pk=customer_id).first()
        if customer is None:
            raise CustomerNotFoundError()
        return customer

    @staticmethod
    @transaction.atomic
    def update(principal: Principal, customer_id: int, validated_data: dict) -> Customer:
        """
        Overwrite a customer's profile fields.

        The body id must match the path id before any ownership check runs.
        """
        if customer_id != validated_data['id']:
            raise InconsistentDetailsError()
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        customer = CustomerService._locked(customer_id)
        CustomerService._apply_profile(customer, validated_data)
        customer.save()

        logger.info("Customer %d updated by %s", customer.pk, principal.email)
        return customer

    @staticmethod
    @transaction.atomic
    def delete(principal: Principal, customer_id: int) -> None:
        """Delete a customer; its offering, loans and lockers go with it."""
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        deleted, _ = Customer.objects.filter(pk=customer_id).delete()
        if not deleted:
            raise CustomerNotFoundError()

        logger.info("Customer %d removed by %s", customer_id, principal.email)

    @staticmethod
    def _locked(customer_id: int) -> Customer:
        try:
            return Customer.objects.select_for_update().get(pk=customer_id)
        except Customer.DoesNotExist:
            raise CustomerNotFoundError()

    @staticmethod
    def _apply_profile(customer: Customer, validated_data: dict) -> None:
        for field, value in validated_data.items():
            if field != 'id':
                setattr(customer, field, value)
