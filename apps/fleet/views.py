import logging

from django.core.exceptions import ValidationError
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Vehicle, FuelEntry, EntryType
from .serializers import (
    VehicleSerializer,
    VehicleFilterSerializer,
    VehicleDeleteSerializer,
    VehicleStatsSerializer,
    ServiceOverviewSerializer,
    FuelEntrySerializer,
    FuelFilterSerializer,
    FuelSummarySerializer,
)
from .services import (
    derive_mileage,
    fuel_summary,
    retire_vehicle,
    vehicle_stats,
    service_overview,
    VehicleNotFoundError,
    FuelEntryNotFoundError,
)

logger = logging.getLogger(__name__)


class VehicleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Vehicle CRUD operations.

    list: Active vehicles, newest first (``include_inactive=true`` for all)
    create/update/partial_update: Manage vehicle details
    destroy: Deactivate, or delete with ``mode=hard``
    """

    queryset = Vehicle.objects.all()
    serializer_class = VehicleSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = VehicleFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        if not filter_serializer.validated_data['include_inactive']:
            queryset = queryset.filter(active=True)
        return queryset.order_by('-created_at')

    def get_object(self):
        try:
            return Vehicle.objects.get(pk=self.kwargs['pk'])
        except (Vehicle.DoesNotExist, ValueError, ValidationError):
            raise VehicleNotFoundError()

    @extend_schema(parameters=[
        OpenApiParameter('mode', OpenApiTypes.STR, enum=['soft', 'hard'], description='soft (default) or hard'),
    ])
    def destroy(self, request, *args, **kwargs):
        vehicle = self.get_object()
        params = VehicleDeleteSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        deleted = retire_vehicle(vehicle=vehicle, hard=params.validated_data['mode'] == 'hard')
        return Response({'success': True, 'deleted': deleted}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: VehicleStatsSerializer})
    @action(detail=True, methods=['get'])
    def stats(self, request, pk=None):
        """
        Spend and distance dashboard for one vehicle.

        GET /api/vehicles/{id}/stats/
        """
        vehicle = self.get_object()
        return Response(VehicleStatsSerializer(vehicle_stats(vehicle)).data)

    @extend_schema(responses={200: ServiceOverviewSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path='service-overview')
    def service_overview(self, request):
        """
        Last service and km since it, per active vehicle.

        GET /api/vehicles/service-overview/
        """
        return Response(ServiceOverviewSerializer(service_overview(), many=True).data)


class FuelEntryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the fuel log.

    list: Entries newest first, each with derived distance and mileage
    create/update/partial_update/destroy: Manage entries
    """

    queryset = FuelEntry.objects.all()
    serializer_class = FuelEntrySerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = FuelFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('vehicle'):
            queryset = queryset.filter(vehicle_type=params['vehicle'])
        if params.get('vehicle_id'):
            queryset = queryset.filter(vehicle_id=params['vehicle_id'])
        if params.get('entry_type'):
            queryset = queryset.filter(entry_type=params['entry_type'])

        return queryset.order_by('-date', '-created_at')

    @staticmethod
    def _mileage_map():
        # Readings depend on the whole refuel history, not the filtered page
        refuels = FuelEntry.objects.filter(entry_type=EntryType.REFUELING).order_by('created_at')
        return derive_mileage(refuels)

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if getattr(self, 'action', None) in ('list', 'retrieve'):
            context['mileage'] = self._mileage_map()
        return context

    def get_object(self):
        try:
            return FuelEntry.objects.get(pk=self.kwargs['pk'])
        except (FuelEntry.DoesNotExist, ValueError, ValidationError):
            raise FuelEntryNotFoundError()

    def perform_create(self, serializer):
        entry = serializer.save()
        serializer.context['mileage'] = self._mileage_map()
        logger.info(f"Fuel entry {entry.entry_type} logged for {entry.vehicle_name or entry.vehicle_type} on {entry.date}")

    def perform_update(self, serializer):
        serializer.save()
        serializer.context['mileage'] = self._mileage_map()

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({'message': 'Fuel entry deleted successfully'}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: FuelSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """
        Fuel and service spend for this month, last month and the year.

        GET /api/fuel/summary/
        """
        return Response(FuelSummarySerializer(fuel_summary()).data)
