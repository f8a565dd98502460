from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'customers'

router = SimpleRouter()
router.register(r'names', views.NameViewSet, basename='name')
router.register(r'customers', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # Name routes
    # GET    /api/names/              - List names
    # POST   /api/names/              - Add name

    # Customer routes
    # GET    /api/customers/          - List customers
    # POST   /api/customers/          - Add customer
    # GET    /api/customers/{id}/     - Get customer
    # PUT    /api/customers/{id}/     - Update customer
    # PATCH  /api/customers/{id}/     - Partial update
    # DELETE /api/customers/{id}/     - Delete customer
    path('', include(router.urls)),
]
