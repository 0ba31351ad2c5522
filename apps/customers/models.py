"""
Customer model for the Bank Records API.
"""

from django.db import models

from apps.core.models import Account
from apps.core.principal import Role

CUSTOMER_ROLE_CHOICES = [
    (Role.CUSTOMER.value, Role.CUSTOMER.label),
]


class Customer(Account):
    """
    Represents a bank customer.

    Holds account, branch, card and contact details. A customer owns at
    most one offering (see ``apps.offerings``).
    """

    role = models.CharField(
        max_length=20,
        choices=CUSTOMER_ROLE_CHOICES,
        default=Role.CUSTOMER,
    )
    account_number = models.BigIntegerField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Customer's bank account number."
    )
    account_type = models.CharField(max_length=50, null=True, blank=True)
    contact_number = models.BigIntegerField(null=True, blank=True)
    pan_number = models.BigIntegerField(
        null=True,
        blank=True,
        help_text="Customer's PAN card number."
    )
    branch_name = models.CharField(max_length=100, null=True, blank=True)
    branch_code = models.BigIntegerField(null=True, blank=True)
    branch_ifsc = models.CharField(max_length=20, null=True, blank=True)
    card_number = models.BigIntegerField(null=True, blank=True)
    card_credit_limit = models.BigIntegerField(null=True, blank=True)
    card_expiry_date = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'customers'
        ordering = ['id']

    def __str__(self):
        return f"{self.name or self.email} (ID: {self.pk})"
