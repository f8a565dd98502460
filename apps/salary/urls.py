from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'salary'

router = SimpleRouter()
router.register(r'', views.SalaryRecordViewSet, basename='salary')

urlpatterns = [
    # GET    /api/salary/               - List years
    # POST   /api/salary/               - Add year
    # GET    /api/salary/{id}/          - Get record
    # PUT    /api/salary/{id}/          - Update record
    # PATCH  /api/salary/{id}/          - Partial update
    # DELETE /api/salary/{id}/          - Delete record

    # Custom actions
    # GET    /api/salary/year/{year}/   - Record by year
    # POST   /api/salary/calculate/     - Preview figures
    path('', include(router.urls)),
]
