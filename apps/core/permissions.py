"""
Role gates for API views.
"""

from rest_framework.permissions import BasePermission

from apps.core.principal import Principal


def _principal(request):
    user = getattr(request, 'user', None)
    return user if isinstance(user, Principal) else None


class IsCustomer(BasePermission):
    """Allows access only to customer principals."""

    def has_permission(self, request, view):
        principal = _principal(request)
        return principal is not None and principal.is_customer


class IsEmployee(BasePermission):
    """Allows access to employees and managers."""

    def has_permission(self, request, view):
        principal = _principal(request)
        return principal is not None and principal.is_employee


class IsManager(BasePermission):
    """Allows access only to managers."""

    def has_permission(self, request, view):
        principal = _principal(request)
        return principal is not None and principal.is_manager


class IsCustomerOrEmployee(BasePermission):
    """Allows access to any authenticated account."""

    def has_permission(self, request, view):
        principal = _principal(request)
        return principal is not None and (principal.is_customer or principal.is_employee)


class MethodPermissionsMixin:
    """
    Pick permission classes per HTTP method.

    Views set ``method_permission_classes = {'GET': [...], ...}``; methods
    missing from the mapping fall back to ``permission_classes``.
    """

    method_permission_classes = {}

    def get_permissions(self):
        classes = self.method_permission_classes.get(
            self.request.method, self.permission_classes
        )
        return [permission() for permission in classes]
