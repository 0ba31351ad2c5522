"""
Loan service layer.

Loans are always reached through the owning customer's offering. A
loan that exists under another customer's offering is reported as
unauthorized, never as missing.
"""

import logging

from apps.core.exceptions import (
    InconsistentDetailsError,
    LoanNotFoundError,
    UnauthorizedCustomerError,
)
from apps.core.ownership import OwnershipValidator, ResourceKind
from apps.core.principal import Principal
from apps.loans.models import Loan
from apps.offerings.aggregate import OfferingAggregate
from apps.offerings.models import Offering

logger = logging.getLogger(__name__)


class LoanService:
    """Service class for loan-related operations."""

    @staticmethod
    def create(principal: Principal, customer_id: int, validated_data: dict) -> int:
        """
        Add a loan to the customer's offering.

        Returns:
            The new loan's number.

        Raises:
            UnauthorizedCustomerError: Not the principal's customer, or the
                customer has no offering.
            InconsistentDetailsError: Number already in use, or the payload
                names a different customer.
        """
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)
        loan = OfferingAggregate.add_loan(customer_id, validated_data)
        return loan.number

    @staticmethod
    def list_for_customer(principal: Principal, customer_id: int) -> list:
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        offering = Offering.objects.filter(customer_id=customer_id).first()
        if offering is None:
            raise UnauthorizedCustomerError()
        return list(offering.loans.all())

    @staticmethod
    def get(principal: Principal, customer_id: int, number: int) -> Loan:
        OwnershipValidator.enforce(principal, ResourceKind.LOAN, customer_id, number)

        loan = Loan.objects.filter(number=number).first()
        if loan is None:
            raise LoanNotFoundError()
        return loan

    @staticmethod
    def update(principal: Principal, customer_id: int, number: int,
               validated_data: dict) -> Loan:
        """Change a loan's amount; number and owner are fixed."""
        if number != validated_data['number']:
            raise InconsistentDetailsError()
        payload_customer = validated_data.get('customer_id')
        if payload_customer is not None and payload_customer != customer_id:
            raise InconsistentDetailsError()
        OwnershipValidator.enforce(principal, ResourceKind.LOAN, customer_id, number)

        loan = OfferingAggregate.update_loan(number, validated_data)
        logger.info("Loan #%d updated by %s", number, principal.email)
        return loan

    @staticmethod
    def delete(principal: Principal, customer_id: int, number: int) -> None:
        OwnershipValidator.enforce(principal, ResourceKind.LOAN, customer_id, number)
        OfferingAggregate.remove_loan(number)
