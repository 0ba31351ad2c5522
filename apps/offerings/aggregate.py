"""
Consistency rules for the offering aggregate.

An offering groups the loans and lockers of one customer. Every compound
write runs in a single transaction with the owning row locked, so
concurrent writers to the same offering are serialized and a reader
never observes a half-applied change. Loan and locker numbers are unique
across the whole system, not just within one offering.
"""

import logging
from typing import Iterable

from django.db import IntegrityError, transaction

from apps.core.exceptions import (
    CustomerNotFoundError,
    InconsistentDetailsError,
    LoanNotFoundError,
    LockerNotFoundError,
    OfferingAlreadyAddedError,
    OfferingNotFoundError,
    OfferingUpdateNotSupportedError,
    UnauthorizedCustomerError,
)
from apps.customers.models import Customer
from apps.loans.models import Loan
from apps.lockers.models import Locker
from apps.offerings.models import Offering

logger = logging.getLogger(__name__)


def _check_numbers(model, numbers: list) -> None:
    """Numbers must be unique in the payload and unused by any stored row."""
    if len(numbers) != len(set(numbers)):
        raise InconsistentDetailsError()
    if numbers and model.objects.filter(number__in=numbers).exists():
        raise InconsistentDetailsError()


def _check_loan_owner(customer_id: int, loans: Iterable[dict]) -> None:
    for loan in loans:
        payload_customer = loan.get('customer_id')
        if payload_customer is not None and payload_customer != customer_id:
            raise InconsistentDetailsError()


class OfferingAggregate:
    """Transactional writes over an offering and its loans and lockers."""

    @staticmethod
    @transaction.atomic
    def create(customer_id: int, lockers: list, loans: list) -> Offering:
        """
        Create the customer's offering together with its initial children.

        Args:
            customer_id: Owner of the new offering.
            lockers: Locker payloads (number, account_number, branch_code).
            loans: Loan payloads (number, amount, optional customer_id).

        Raises:
            CustomerNotFoundError: No customer with this id.
            OfferingAlreadyAddedError: The customer already has an offering.
            InconsistentDetailsError: A number is reused, or a loan names
                another customer.
        """
        customer = Customer.objects.select_for_update().filter(pk=customer_id).first()
        if customer is None:
            raise CustomerNotFoundError()
        if Offering.objects.filter(customer_id=customer_id).exists():
            raise OfferingAlreadyAddedError()

        _check_numbers(Locker, [locker['number'] for locker in lockers])
        _check_numbers(Loan, [loan['number'] for loan in loans])
        _check_loan_owner(customer_id, loans)

        offering = Offering.objects.create(customer=customer)
        try:
            with transaction.atomic():
                Locker.objects.bulk_create([
                    Locker(
                        number=locker['number'],
                        account_number=locker['account_number'],
                        branch_code=locker['branch_code'],
                        offering=offering,
                    )
                    for locker in lockers
                ])
                Loan.objects.bulk_create([
                    Loan(
                        number=loan['number'],
                        customer_id=customer_id,
                        amount=loan['amount'],
                        offering=offering,
                    )
                    for loan in loans
                ])
        except IntegrityError as exc:
            raise InconsistentDetailsError() from exc

        logger.info(
            "Offering %d created for customer %d (%d lockers, %d loans)",
            offering.pk, customer_id, len(lockers), len(loans),
        )
        return offering

    @staticmethod
    def update(customer_id: int, data: dict) -> Offering:
        raise OfferingUpdateNotSupportedError()

    @staticmethod
    def _locked_offering(customer_id: int) -> Offering:
        offering = (
            Offering.objects.select_for_update()
            .filter(customer_id=customer_id)
            .first()
        )
        if offering is None:
            raise UnauthorizedCustomerError()
        return offering

    @staticmethod
    def _insert_child(offering: Offering, child) -> None:
        try:
            with transaction.atomic():
                child.save()
        except IntegrityError as exc:
            raise InconsistentDetailsError() from exc
        # bump updated_at on the aggregate root in the same transaction
        offering.save(update_fields=['updated_at'])

    @classmethod
    @transaction.atomic
    def add_loan(cls, customer_id: int, data: dict) -> Loan:
        """Append a loan to the customer's offering."""
        offering = cls._locked_offering(customer_id)
        _check_numbers(Loan, [data['number']])
        _check_loan_owner(customer_id, [data])

        loan = Loan(
            number=data['number'],
            customer_id=customer_id,
            amount=data['amount'],
            offering=offering,
        )
        cls._insert_child(offering, loan)

        logger.info("Loan #%d added to offering %d", loan.number, offering.pk)
        return loan

    @classmethod
    @transaction.atomic
    def add_locker(cls, customer_id: int, data: dict) -> Locker:
        """Append a locker to the customer's offering."""
        offering = cls._locked_offering(customer_id)
        _check_numbers(Locker, [data['number']])

        locker = Locker(
            number=data['number'],
            account_number=data['account_number'],
            branch_code=data['branch_code'],
            offering=offering,
        )
        cls._insert_child(offering, locker)

        logger.info("Locker #%d added to offering %d", locker.number, offering.pk)
        return locker

    @staticmethod
    @transaction.atomic
    def update_loan(number: int, data: dict) -> Loan:
        """Overwrite the amount of a loan. Every other field is immutable."""
        loan = Loan.objects.select_for_update().filter(number=number).first()
        if loan is None:
            raise LoanNotFoundError()

        loan.amount = data['amount']
        loan.save(update_fields=['amount', 'updated_at'])
        return loan

    @staticmethod
    @transaction.atomic
    def update_locker(number: int, data: dict) -> Locker:
        """Overwrite the billing account and branch of a locker."""
        locker = Locker.objects.select_for_update().filter(number=number).first()
        if locker is None:
            raise LockerNotFoundError()

        locker.account_number = data['account_number']
        locker.branch_code = data['branch_code']
        locker.save(update_fields=['account_number', 'branch_code', 'updated_at'])
        return locker

    @staticmethod
    @transaction.atomic
    def remove_loan(number: int) -> None:
        deleted, _ = Loan.objects.filter(number=number).delete()
        if not deleted:
            raise LoanNotFoundError()
        logger.info("Loan #%d removed", number)

    @staticmethod
    @transaction.atomic
    def remove_locker(number: int) -> None:
        deleted, _ = Locker.objects.filter(number=number).delete()
        if not deleted:
            raise LockerNotFoundError()
        logger.info("Locker #%d removed", number)

    @staticmethod
    @transaction.atomic
    def remove(customer_id: int) -> None:
        """Delete the customer's offering; its loans and lockers cascade."""
        deleted, _ = Offering.objects.filter(customer_id=customer_id).delete()
        if not deleted:
            raise OfferingNotFoundError()
        logger.info("Offering of customer %d removed", customer_id)
