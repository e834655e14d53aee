# core/mixins.py
from rest_framework import status
from rest_framework.response import Response
import logging

logger = logging.getLogger(__name__)


class ServerErrorMixin:
    """Render unexpected failures as a 500 envelope carrying the underlying message"""

    def server_error(self, message, exc):
        logger.error(
            f"{message} for user {getattr(self.request.user, 'id', None)}: {str(exc)}",
            exc_info=True,
        )
        return Response(
            {"success": False, "error": message, "details": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
