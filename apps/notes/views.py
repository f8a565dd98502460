import logging

from django.core.exceptions import ValidationError
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Note
from .serializers import NoteSerializer, NoteFilterSerializer
from .exceptions import NoteNotFoundError

logger = logging.getLogger(__name__)


class NoteViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's notes.

    list: Pinned notes first, then newest (``pinned=true`` for pinned only)
    create: Add a note
    update/partial_update: Edit a note
    destroy: Delete a note
    """

    serializer_class = NoteSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = Note.objects.filter(owner=self.request.user).order_by('-pinned', '-created_at')
        if self.action != 'list':
            return queryset

        filter_serializer = NoteFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        pinned = filter_serializer.validated_data.get('pinned')
        if pinned is not None:
            queryset = queryset.filter(pinned=pinned)
        return queryset

    def get_object(self):
        try:
            return self.get_queryset().get(pk=self.kwargs['pk'])
        except (Note.DoesNotExist, ValueError, ValidationError):
            raise NoteNotFoundError()

    @extend_schema(parameters=[
        OpenApiParameter('pinned', OpenApiTypes.BOOL, description='Only pinned (true) or unpinned (false) notes'),
    ])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def perform_create(self, serializer):
        note = serializer.save(owner=self.request.user)
        logger.info(f"Note {note.id} created by {self.request.user.username}")

    def destroy(self, request, *args, **kwargs):
        note = self.get_object()
        note.delete()
        return Response({'message': 'Note deleted successfully'}, status=status.HTTP_200_OK)
