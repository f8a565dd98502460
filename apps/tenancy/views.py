from django.core.exceptions import ValidationError
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Flat, Tenant, RentRecord
from .serializers import (
    FlatSerializer,
    TenantSerializer,
    TenantSummarySerializer,
    TenantCreateSerializer,
    RentRecordSerializer,
    RentFilterSerializer,
    RentUpsertSerializer,
)
from .services import (
    move_in_tenant,
    ensure_monthly_rents,
    upsert_rent_record,
    toggle_rent_paid,
)
from .exceptions import FlatNotFoundError, TenantNotFoundError, RentRecordNotFoundError


def _get_or_404(model, pk, error):
    try:
        return model.objects.get(pk=pk)
    except (model.DoesNotExist, ValueError, ValidationError):
        raise error()


class FlatViewSet(mixins.ListModelMixin,
                  mixins.CreateModelMixin,
                  mixins.RetrieveModelMixin,
                  viewsets.GenericViewSet):
    """
    Flats with their current tenant.

    list: All flats by number
    create: Add a flat
    tenants: Tenancy history of one flat
    """

    queryset = Flat.objects.select_related('current_tenant').order_by('number')
    serializer_class = FlatSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return _get_or_404(Flat, self.kwargs['pk'], FlatNotFoundError)

    @extend_schema(responses={200: TenantSummarySerializer(many=True)})
    @action(detail=True, methods=['get'])
    def tenants(self, request, pk=None):
        """
        Every tenant the flat has had, latest start date first.

        GET /api/tenancy/flats/{id}/tenants/
        """
        flat = self.get_object()
        history = flat.tenants.order_by('-start_date', '-created_at')
        return Response(TenantSummarySerializer(history, many=True).data)


class TenantViewSet(mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    mixins.UpdateModelMixin,
                    viewsets.GenericViewSet):
    """
    Tenants across all flats.

    list: All tenants
    create: Move a tenant into a flat
    update/partial_update: Edit tenant details
    """

    queryset = Tenant.objects.select_related('flat')
    serializer_class = TenantSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return _get_or_404(Tenant, self.kwargs['pk'], TenantNotFoundError)

    @extend_schema(request=TenantCreateSerializer, responses={201: TenantSerializer})
    def create(self, request, *args, **kwargs):
        serializer = TenantCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tenant = move_in_tenant(**serializer.validated_data)
        return Response(TenantSerializer(tenant).data, status=status.HTTP_201_CREATED)


class RentRecordViewSet(mixins.ListModelMixin,
                        viewsets.GenericViewSet):
    """
    Monthly rent records.

    list: Records, optionally for one month (``month=YYYY-MM``); asking for
        a month first creates missing unpaid records for occupied flats
    upsert: Create or overwrite a month's record
    toggle: Flip paid state
    """

    queryset = RentRecord.objects.select_related('flat', 'tenant')
    serializer_class = RentRecordSerializer
    permission_classes = [IsAuthenticated]

    @extend_schema(parameters=[
        OpenApiParameter('month', OpenApiTypes.STR, description='Month (YYYY-MM)'),
    ])
    def list(self, request, *args, **kwargs):
        filter_serializer = RentFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        month = filter_serializer.validated_data.get('month')

        queryset = self.get_queryset()
        if month:
            ensure_monthly_rents(month=month)
            queryset = queryset.filter(month=month)

        return Response(RentRecordSerializer(queryset, many=True).data)

    @extend_schema(request=RentUpsertSerializer, responses={200: RentRecordSerializer})
    @action(detail=False, methods=['post'])
    def upsert(self, request):
        """
        Create or overwrite the record for a flat, tenant and month.

        POST /api/tenancy/rents/upsert/
        """
        serializer = RentUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        record = upsert_rent_record(**serializer.validated_data)
        return Response(RentRecordSerializer(record).data)

    @extend_schema(request=None, responses={200: RentRecordSerializer})
    @action(detail=True, methods=['put'])
    def toggle(self, request, pk=None):
        """
        Flip paid state.

        PUT /api/tenancy/rents/{id}/toggle/
        """
        record = _get_or_404(RentRecord, pk, RentRecordNotFoundError)
        record = toggle_rent_paid(record=record)
        return Response(RentRecordSerializer(record).data)
