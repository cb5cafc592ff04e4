"""
Role-based permission classes shared by all apps.

Regular users work with their own records; the admin role unlocks
everything (all bookings, dealers, batches, the wallet, user management).
"""
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """
    Allow access only to authenticated users with the admin role.

    Usage:
        class DealerViewSet(viewsets.ModelViewSet):
            permission_classes = [IsAuthenticated, IsAdminRole]
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_admin', False))
