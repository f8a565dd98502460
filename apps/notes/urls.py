from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'notes'

router = SimpleRouter()
router.register(r'', views.NoteViewSet, basename='note')

urlpatterns = [
    # GET    /api/notes/             - List own notes (?pinned=true)
    # POST   /api/notes/             - Create note
    # GET    /api/notes/{id}/        - Get note
    # PUT    /api/notes/{id}/        - Update note
    # PATCH  /api/notes/{id}/        - Partial update
    # DELETE /api/notes/{id}/        - Delete note
    path('', include(router.urls)),
]
