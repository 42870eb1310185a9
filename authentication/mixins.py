"""
View mixins for the admin gate.
"""
import logging

from django.http import JsonResponse

from .authorizers import get_admin_authorizer

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = 'X-Admin-Token'


class AdminTokenRequiredMixin:
    """
    Reject the request with 401 unless the X-Admin-Token header is
    accepted by the configured authorizer.

    Must come before APIView in the bases so the check runs before
    any handler.
    """

    def dispatch(self, request, *args, **kwargs):
        credential = request.headers.get(ADMIN_TOKEN_HEADER)

        if not get_admin_authorizer().authorize(credential):
            logger.warning(
                f"Rejected admin request - {request.method} {request.path}, "
                f"token supplied: {bool(credential)}"
            )
            return JsonResponse({'error': 'Unauthorized'}, status=401)

        return super().dispatch(request, *args, **kwargs)
