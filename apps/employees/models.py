"""
Employee model for the Bank Records API.
"""

from django.db import models

from apps.core.models import Account
from apps.core.principal import Role

EMPLOYEE_ROLE_CHOICES = [
    (Role.EMPLOYEE.value, Role.EMPLOYEE.label),
    (Role.MANAGER.value, Role.MANAGER.label),
]


class Employee(Account):
    """Represents a bank employee. Managers are employees with ROLE_MANAGER."""

    role = models.CharField(
        max_length=20,
        choices=EMPLOYEE_ROLE_CHOICES,
        default=Role.EMPLOYEE,
    )
    salary = models.PositiveIntegerField(null=True, blank=True)
    title = models.CharField(max_length=100, null=True, blank=True)
    joining_date = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'employees'
        ordering = ['id']

    def __str__(self):
        return f"{self.name or self.email} (ID: {self.pk})"
