from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'tenancy'

router = SimpleRouter()
router.register(r'flats', views.FlatViewSet, basename='flat')
router.register(r'tenants', views.TenantViewSet, basename='tenant')
router.register(r'rents', views.RentRecordViewSet, basename='rent')

urlpatterns = [
    # Flat routes
    # GET    /api/tenancy/flats/                - List flats
    # POST   /api/tenancy/flats/                - Add flat
    # GET    /api/tenancy/flats/{id}/tenants/   - Tenant history

    # Tenant routes
    # GET    /api/tenancy/tenants/              - List tenants
    # POST   /api/tenancy/tenants/              - Move tenant in
    # PUT    /api/tenancy/tenants/{id}/         - Update tenant

    # Rent routes
    # GET    /api/tenancy/rents/?month=YYYY-MM  - List (creates missing)
    # POST   /api/tenancy/rents/upsert/         - Create or overwrite
    # PUT    /api/tenancy/rents/{id}/toggle/    - Flip paid
    path('', include(router.urls)),
]
