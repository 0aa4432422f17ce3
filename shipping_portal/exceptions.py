import logging

from rest_framework import status, views
from rest_framework.exceptions import APIException, ValidationError

from shipping_portal.responses import error_body

logger = logging.getLogger(__name__)


class ZoneNotFound(APIException):
    """
    Raised when zone_id does not resolve to a zone
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Invalid resource ID."
    default_code = 'shipping_zone_invalid'


class ZoneMethodNotFound(APIException):
    """
    Raised when instance_id does not match any method instance of the resolved zone
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource doesn't exist."
    default_code = 'shipping_zone_method_invalid'


class ZoneMethodCreationFailed(APIException):
    """
    Raised when the freshly added method instance can not be found back in its zone. Not retried.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Resource cannot be created."
    default_code = 'shipping_zone_method_not_created'


class TrashNotSupported(APIException):
    """
    Raised on non-forced delete. Shipping zone methods can only be deleted permanently with force=true.
    """
    status_code = status.HTTP_501_NOT_IMPLEMENTED
    default_detail = "Shipping methods do not support trashing."
    default_code = 'trash_not_supported'


def exception_handler(exc, context):
    """
    DRF exception handler that renders every API error as {code, message, data: {status}}

    Wired through REST_FRAMEWORK['EXCEPTION_HANDLER'] setting.
    """
    response = views.exception_handler(exc, context)

    if response is None:
        return None

    if isinstance(exc, ValidationError):
        params = response.data
        names = ', '.join(params.keys()) if isinstance(params, dict) else ''
        response.data = error_body(
            code='rest_invalid_param',
            message=f"Invalid parameter(s): {names}" if names else "Invalid parameter(s).",
            status_code=response.status_code,
            params=params,
        )
        return response

    detail = response.data.get('detail', '') if isinstance(response.data, dict) else response.data
    code = getattr(detail, 'code', None) or 'rest_error'

    response.data = error_body(code=code, message=str(detail), status_code=response.status_code)
    return response
