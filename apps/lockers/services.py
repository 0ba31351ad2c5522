"""
Locker service layer.
"""

import logging

from apps.core.exceptions import (
    InconsistentDetailsError,
    LockerNotFoundError,
    UnauthorizedCustomerError,
)
from apps.core.ownership import OwnershipValidator, ResourceKind
from apps.core.principal import Principal
from apps.lockers.models import Locker
from apps.offerings.aggregate import OfferingAggregate
from apps.offerings.models import Offering

logger = logging.getLogger(__name__)


class LockerService:
    """Service class for locker-related operations."""

    @staticmethod
    def create(principal: Principal, customer_id: int, validated_data: dict) -> int:
        """Add a locker to the customer's offering and return its number."""
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)
        locker = OfferingAggregate.add_locker(customer_id, validated_data)
        return locker.number

    @staticmethod
    def list_for_customer(principal: Principal, customer_id: int) -> list:
        OwnershipValidator.enforce(principal, ResourceKind.CUSTOMER, customer_id)

        offering = Offering.objects.filter(customer_id=customer_id).first()
        if offering is None:
            raise UnauthorizedCustomerError()
        return list(offering.lockers.all())

    @staticmethod
    def get(principal: Principal, customer_id: int, number: int) -> Locker:
        OwnershipValidator.enforce(principal, ResourceKind.LOCKER, customer_id, number)

        locker = Locker.objects.filter(number=number).first()
        if locker is None:
            raise LockerNotFoundError()
        return locker

    @staticmethod
    def update(principal: Principal, customer_id: int, number: int,
               validated_data: dict) -> Locker:
        if number != validated_data['number']:
            raise InconsistentDetailsError()
        OwnershipValidator.enforce(principal, ResourceKind.LOCKER, customer_id, number)

        locker = OfferingAggregate.update_locker(number, validated_data)
        logger.info("Locker #%d updated by %s", number, principal.email)
        return locker

    @staticmethod
    def delete(principal: Principal, customer_id: int, number: int) -> None:
        OwnershipValidator.enforce(principal, ResourceKind.LOCKER, customer_id, number)
        OfferingAggregate.remove_locker(number)
