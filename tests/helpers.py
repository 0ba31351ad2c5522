"""
Shared fixtures for the API test suites.
"""

import base64

from django.contrib.auth.hashers import make_password
from rest_framework.test import APIClient

from apps.core.principal import Role
from apps.customers.models import Customer
from apps.employees.models import Employee

PASSWORD = 'S3cret-pass'


def basic_auth(email, password=PASSWORD):
    token = base64.b64encode(f'{email}:{password}'.encode()).decode()
    return f'Basic {token}'


def create_customer(email, password=PASSWORD, **fields):
    return Customer.objects.create(
        email=email,
        password=make_password(password),
        role=Role.CUSTOMER,
        **fields,
    )


def create_employee(email, password=PASSWORD, role=Role.EMPLOYEE, **fields):
    return Employee.objects.create(
        email=email,
        password=make_password(password),
        role=role,
        **fields,
    )


def client_for(account, password=PASSWORD):
    """APIClient sending HTTP Basic credentials for ``account``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=basic_auth(account.email, password))
    return client


def customer_profile(customer_id, **overrides):
    payload = {
        'id': customer_id,
        'name': 'Asha Rao',
        'account_number': 50100234,
        'account_type': 'savings',
        'contact_number': 9876543210,
        'pan_number': 4455667788,
        'branch': {'name': 'MG Road', 'code': 7, 'ifsc': 'BANK0000007'},
        'address': {
            'street': '12 Lake View',
            'state': 'Karnataka',
            'city': 'Bengaluru',
            'pin': '560001',
        },
    }
    payload.update(overrides)
    return payload


def offering_payload(lockers=(), loans=()):
    return {'lockers': list(lockers), 'loans': list(loans)}
