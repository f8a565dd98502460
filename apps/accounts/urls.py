from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('auth/login/', views.login, name='login'),
    path('auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('auth/me/', views.get_current_user, name='current-user'),

    # User administration
    path('users/', views.list_users, name='user-list'),
    path('users/<uuid:pk>/reset-password/', views.reset_password, name='reset-password'),
]
