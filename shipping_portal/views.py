import logging

from django.http import HttpRequest

from shipping_portal.responses import JsonErrorResponse

logger = logging.getLogger(__name__)


def not_found(request: HttpRequest, exception=None):
    return JsonErrorResponse('rest_no_route', "No route was found matching the URL and request method.", 404)


def server_error(request: HttpRequest):
    logger.error(f"Internal server error on {request.method} {request.path}")
    return JsonErrorResponse('rest_internal_error', "Internal server error.", 500)
