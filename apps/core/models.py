"""
Abstract model bases shared by customer and employee accounts.
"""

from django.db import models


class Account(models.Model):
    """
    A login-capable record.

    Registration creates the row with only ``email``, ``password`` and
    ``role`` set; ``name`` stays NULL until the profile is completed.
    """

    email = models.CharField(
        max_length=254,
        unique=True,
        help_text="Login identifier, shared namespace across account types."
    )
    password = models.CharField(
        max_length=128,
        help_text="Hashed credential."
    )
    name = models.CharField(
        max_length=150,
        null=True,
        blank=True,
        help_text="Unset until the profile is completed."
    )
    address_street = models.CharField(max_length=200, null=True, blank=True)
    address_state = models.CharField(max_length=100, null=True, blank=True)
    address_city = models.CharField(max_length=100, null=True, blank=True)
    address_pin = models.CharField(max_length=20, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    @property
    def is_profile_complete(self):
        """A record is incomplete until its name is set."""
        return self.name is not None
