from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'payments'

router = SimpleRouter()
router.register(r'', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # GET    /api/payments/            - List payments
    # POST   /api/payments/            - Record payment
    # GET    /api/payments/{id}/       - Get payment
    # DELETE /api/payments/{id}/       - Delete payment
    # POST   /api/payments/mark-paid/  - Settle tickets with one payment

    path('partial/account/<str:account>/', views.clear_partials, name='clear-partials'),

    path('', include(router.urls)),
]
