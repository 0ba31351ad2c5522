"""
Employee URL configuration.
"""

from django.urls import path

from apps.employees.views import (
    EmployeeDetailView,
    EmployeeListView,
    RegisterEmployeeView,
)

urlpatterns = [
    path(
        'employees/register',
        RegisterEmployeeView.as_view(),
        name='employee-register',
    ),
    path('employees', EmployeeListView.as_view(), name='employee-list'),
    path(
        'employees/<int:employee_id>',
        EmployeeDetailView.as_view(),
        name='employee-detail',
    ),
]
