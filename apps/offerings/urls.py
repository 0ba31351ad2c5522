"""
Offering URL configuration.
"""

from django.urls import path

from apps.offerings.views import OfferingView

urlpatterns = [
    path(
        'customers/<int:customer_id>/offerings',
        OfferingView.as_view(),
        name='offering-detail',
    ),
]
