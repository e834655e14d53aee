# core/exceptions.py
"""
DRF exception handler that renders every API error in the
``{"success": false, "error": ...}`` envelope used by the client apps.
"""

from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler
import logging

logger = logging.getLogger(__name__)


def _first_message(detail, field=None):
    """Return the first human readable message found in a DRF error detail"""
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key in ("detail", "non_field_errors"):
                name = field
            else:
                name = f"{field}.{key}" if field else str(key)
            message = _first_message(value, name)
            if message:
                return message
        return None
    if isinstance(detail, (list, tuple)):
        for item in detail:
            message = _first_message(item, field)
            if message:
                return message
        return None
    if detail is None:
        return None
    return f"{field}: {detail}" if field else str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    # Not an APIException: let Django turn it into a 500
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        body = {
            "success": False,
            "error": _first_message(response.data) or "Invalid request",
            "details": response.data,
        }
    else:
        body = {
            "success": False,
            "error": _first_message(response.data) or str(exc),
        }

    view = context.get("view")
    logger.debug(
        f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: "
        f"{body['error']}"
    )
    response.data = body
    return response
