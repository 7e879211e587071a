"""
URL configuration for the Warehouse Inventory API.
"""
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Liveness probe; does not touch the database."""
    return JsonResponse({'status': 'healthy', 'service': 'warehouse-api'})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', health_check, name='health-check'),
    path('api/', include('inventory.urls')),
]
