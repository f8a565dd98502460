"""
Custom permission classes for accounts app.
"""
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """
    Allow access only to users holding the ``admin`` role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdminRole])
        def list_users(request):
            ...
    """

    message = 'Forbidden'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
