"""
Offering aggregate root.
"""

from django.db import models


class Offering(models.Model):
    """
    Groups the loans and lockers of exactly one customer.

    The customer link is a plain foreign key; deleting the customer
    deletes the offering, and deleting the offering deletes its children.
    """

    customer = models.OneToOneField(
        'customers.Customer',
        on_delete=models.CASCADE,
        related_name='offering',
        help_text="The customer who owns this offering."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'offerings'

    def __str__(self):
        return f"Offering #{self.pk} - Customer: {self.customer_id}"
