"""
Core views for the Bank Records API.
"""

from django.http import JsonResponse


def health_check(request):
    """
    GET /health/

    Simple health check endpoint for Docker and load balancer probes.
    Exempt from HTTP Basic authentication.
    """
    return JsonResponse({'status': 'healthy'}, status=200)
