from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'tickets'

router = SimpleRouter()
router.register(r'', views.TicketViewSet, basename='ticket')

urlpatterns = [
    # GET    /api/tickets/              - List tickets
    # POST   /api/tickets/              - Create ticket
    # GET    /api/tickets/{id}/         - Get ticket
    # PUT    /api/tickets/{id}/         - Update ticket
    # PATCH  /api/tickets/{id}/         - Partial update
    # DELETE /api/tickets/{id}/         - Delete ticket

    # Custom actions
    # PUT    /api/tickets/{id}/refund/  - Record refund
    # GET    /api/tickets/summary/      - Profit by type
    # GET    /api/tickets/accounts/     - Dues per account
    path('', include(router.urls)),
]
