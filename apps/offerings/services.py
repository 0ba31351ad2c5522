"""
Offering service layer.

Ownership is checked against the path customer before the aggregate is
touched; the aggregate itself enforces the consistency rules.
"""

import logging

from apps.core.exceptions import OfferingNotFoundError
from apps.core.ownership import OwnershipValidator, ResourceKind
from apps.core.principal import Principal
from apps.offerings.aggregate import OfferingAggregate
from apps.offerings.models import Offering

logger = logging.getLogger(__name__)


class OfferingService:
    """Service class for offering-related operations."""

    @staticmethod
    def create(principal: Principal, customer_id: int, validated_data: dict) -> Offering:
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)

        return OfferingAggregate.create(
            customer_id,
            lockers=validated_data['lockers'],
            loans=validated_data['loans'],
        )

    @staticmethod
    def get(principal: Principal, customer_id: int) -> Offering:
        """
        Retrieve the customer's offering.

        Raises:
            UnauthorizedCustomerError: Principal may not act on this customer.
            OfferingNotFoundError: The customer has no offering.
        """
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)

        offering = (
            Offering.objects.filter(customer_id=customer_id)
            .prefetch_related('lockers', 'loans')
            .first()
        )
        if offering is None:
            raise OfferingNotFoundError()
        return offering

    @staticmethod
    def update(principal: Principal, customer_id: int, validated_data: dict) -> Offering:
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)
        return OfferingAggregate.update(customer_id, validated_data)

    @staticmethod
    def delete(principal: Principal, customer_id: int) -> None:
        OwnershipValidator.enforce(principal, ResourceKind.OFFERING, customer_id)
        OfferingAggregate.remove(customer_id)
