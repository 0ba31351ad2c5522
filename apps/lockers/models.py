"""
Locker model for the Bank Records API.
"""

from django.db import models


class Locker(models.Model):
    """A safe-deposit locker held inside a customer's offering."""

    number = models.BigIntegerField(
        unique=True,
        help_text="Unique locker number across the system."
    )
    account_number = models.BigIntegerField(
        help_text="Account the locker rent is charged to."
    )
    branch_code = models.BigIntegerField(
        help_text="Branch holding the locker."
    )
    offering = models.ForeignKey(
        'offerings.Offering',
        on_delete=models.CASCADE,
        related_name='lockers',
        db_index=True,
        help_text="The offering this locker belongs to."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lockers'
        ordering = ['number']

    def __str__(self):
        return f"Locker #{self.number} - Branch: {self.branch_code}"
