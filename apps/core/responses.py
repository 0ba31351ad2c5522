"""
Uniform response envelope: ``{status, code, message, data}``.
"""

from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(message, data=None, status=http_status.HTTP_200_OK,
             success=True, headers=None):
    """Wrap a payload in the envelope; the HTTP status mirrors ``code``."""
    return Response(
        {
            'status': success,
            'code': status,
            'message': message,
            'data': data,
        },
        status=status,
        headers=headers,
    )
