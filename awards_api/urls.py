"""
URL configuration for awards_api project.
"""
import logging

from django.contrib import admin
from django.contrib.auth.models import Group
from django.db import connection
from django.http import HttpResponse, JsonResponse
from django.urls import path, include

logger = logging.getLogger(__name__)

# Nominations and nominees are edited here, out of band from the public API
admin.site.unregister(Group)

admin.site.site_header = "Awards Voting - Administration"
admin.site.site_title = "Awards Admin"
admin.site.index_title = "Nominations and votes"


def liveness(request):
    """Plain-text liveness check"""
    return HttpResponse("Backend is running", content_type='text/plain; charset=utf-8')


def test_db(request):
    """Round-trip to the database and report its current time"""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT CURRENT_TIMESTAMP")
            row = cursor.fetchone()
        return JsonResponse({'time': str(row[0])})
    except Exception as e:
        logger.error(f"Database check failed: {e}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


urlpatterns = [
    path('', liveness, name='liveness'),
    path('test-db', test_db, name='test_db'),

    # Django admin (catalog editing)
    path('django-admin/', admin.site.urls),

    # API endpoints
    path('', include('voting.urls')),
]
