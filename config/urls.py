"""
URL configuration for the Travel Desk Ledger project.

Every collection is mounted under ``/api/<resource>/`` by its own app.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication and user administration
    path('api/', include('apps.accounts.urls')),

    # API endpoints
    path('api/tickets/', include('apps.tickets.urls')),
    path('api/payments/', include('apps.payments.urls')),
    path('api/', include('apps.fleet.urls')),
    path('api/tenancy/', include('apps.tenancy.urls')),
    path('api/salary/', include('apps.salary.urls')),
    path('api/notes/', include('apps.notes.urls')),
    path('api/', include('apps.customers.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
