"""
Loan model for the Bank Records API.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Loan(models.Model):
    """
    A loan held inside a customer's offering.

    ``number`` is the system-wide business identifier; ``customer_id`` is
    a denormalized copy of the owning customer's id.
    """

    number = models.BigIntegerField(
        unique=True,
        help_text="Unique loan number across the system."
    )
    customer_id = models.BigIntegerField(
        db_index=True,
        help_text="Id of the customer owning the parent offering."
    )
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Loan principal amount.",
    )
    offering = models.ForeignKey(
        'offerings.Offering',
        on_delete=models.CASCADE,
        related_name='loans',
        db_index=True,
        help_text="The offering this loan belongs to."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'loans'
        ordering = ['number']

    def __str__(self):
        return (
            f"Loan #{self.number} - Customer: {self.customer_id} "
            f"- Amount: {self.amount}"
        )
