"""
Locker URL configuration.
"""

from django.urls import path

from apps.lockers.views import LockerDetailView, LockerListView

urlpatterns = [
    path(
        'customers/<int:customer_id>/offerings/lockers',
        LockerListView.as_view(),
        name='locker-list',
    ),
    path(
        'customers/<int:customer_id>/offerings/lockers/<int:number>',
        LockerDetailView.as_view(),
        name='locker-detail',
    ),
]
