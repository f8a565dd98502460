from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'fleet'

router = DefaultRouter()
router.register(r'vehicles', views.VehicleViewSet, basename='vehicle')
router.register(r'fuel', views.FuelEntryViewSet, basename='fuel')

urlpatterns = [
    # Vehicle routes
    # GET    /api/vehicles/                   - List vehicles (?include_inactive=true)
    # POST   /api/vehicles/                   - Create vehicle
    # GET    /api/vehicles/{id}/              - Get vehicle
    # PUT    /api/vehicles/{id}/              - Update vehicle
    # PATCH  /api/vehicles/{id}/              - Partial update
    # DELETE /api/vehicles/{id}/              - Deactivate (?mode=hard deletes)
    # GET    /api/vehicles/{id}/stats/        - Vehicle dashboard
    # GET    /api/vehicles/service-overview/  - Last service per vehicle

    # Fuel routes
    # GET    /api/fuel/                       - List entries with mileage
    # POST   /api/fuel/                       - Log entry
    # PUT    /api/fuel/{id}/                  - Update entry
    # DELETE /api/fuel/{id}/                  - Delete entry
    # GET    /api/fuel/summary/               - Spend by period and type
    path('', include(router.urls)),
]
