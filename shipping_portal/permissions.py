import logging

from rest_framework import permissions

logger = logging.getLogger(__name__)


class ShippingSettingsPermission(permissions.BasePermission):
    """
    Gate each request on Django model permission of the viewset `permission_model`, i.e.

        GET, HEAD, OPTIONS  ->  shipping_portal.view_<model>
        POST                ->  shipping_portal.add_<model>
        PUT, PATCH          ->  shipping_portal.change_<model>
        DELETE              ->  shipping_portal.delete_<model>
    """
    perms_map = {
        'GET': 'view',
        'HEAD': 'view',
        'OPTIONS': 'view',
        'POST': 'add',
        'PUT': 'change',
        'PATCH': 'change',
        'DELETE': 'delete',
    }

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        action = self.perms_map.get(request.method)
        if action is None:
            return False

        perm = f"shipping_portal.{action}_{view.permission_model}"
        allowed = user.has_perm(perm)
        if not allowed:
            logger.info(f"User {user} is missing {perm} for {request.method} {request.path}")
        return allowed
