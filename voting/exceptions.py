"""
DRF exception handler giving framework errors the same {"error": ...} body
the views return themselves (405, 404, 415 raised before a handler runs).
"""
from rest_framework.views import exception_handler


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None and isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response
