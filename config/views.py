from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils import timezone


def health_check(request):
    """Report process and database status."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'ok'
    except DatabaseError:
        database = 'unavailable'

    status = 200 if database == 'ok' else 503
    return JsonResponse({
        'status': 'ok' if status == 200 else 'degraded',
        'database': database,
        'timestamp': timezone.now().isoformat(),
    }, status=status)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'message': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'message': 'Internal server error',
        'status': 500
    }, status=500)
