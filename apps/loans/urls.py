"""
Loan URL configuration.
"""

from django.urls import path

from apps.loans.views import LoanDetailView, LoanListView

urlpatterns = [
    path(
        'customers/<int:customer_id>/offerings/loans',
        LoanListView.as_view(),
        name='loan-list',
    ),
    path(
        'customers/<int:customer_id>/offerings/loans/<int:number>',
        LoanDetailView.as_view(),
        name='loan-detail',
    ),
]
