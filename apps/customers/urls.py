"""
Customer URL configuration.
"""

from django.urls import path

from apps.customers.views import (
    CustomerDetailView,
    CustomerListView,
    RegisterCustomerView,
)

urlpatterns = [
    path(
        'customers/register',
        RegisterCustomerView.as_view(),
        name='customer-register',
    ),
    path('customers', CustomerListView.as_view(), name='customer-list'),
    path(
        'customers/<int:customer_id>',
        CustomerDetailView.as_view(),
        name='customer-detail',
    ),
]
