"""
URL configuration for the Bank Records API.
"""

from django.contrib import admin
from django.urls import include, path

from apps.core.views import health_check

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health_check, name='health-check'),
    path('api/v1/', include('apps.customers.urls')),
    path('api/v1/', include('apps.employees.urls')),
    path('api/v1/', include('apps.offerings.urls')),
    path('api/v1/', include('apps.loans.urls')),
    path('api/v1/', include('apps.lockers.urls')),
]
