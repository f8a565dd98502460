import logging

from django.core.exceptions import ValidationError
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Ticket
from .serializers import (
    TicketSerializer,
    TicketFilterSerializer,
    BookingWindowSerializer,
    RefundInputSerializer,
    ProfitSummarySerializer,
    AccountOverviewSerializer,
)
from .services import TicketAnalytics
from .exceptions import TicketNotFoundError

logger = logging.getLogger(__name__)


class TicketViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Ticket CRUD operations.

    list: Tickets newest first (filterable by account/type/booking window)
    create: Record a booking
    retrieve/update/partial_update: Edit a booking
    destroy: Cancel a booking
    """

    queryset = Ticket.objects.all()
    serializer_class = TicketSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = TicketFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('account'):
            queryset = queryset.filter(account=params['account'])
        if params.get('type'):
            queryset = queryset.filter(type=params['type'])
        if 'date_from' in params:
            queryset = queryset.filter(booking_date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(booking_date__lte=params['date_to'])

        return queryset.order_by('-created_at')

    def get_object(self):
        try:
            return Ticket.objects.get(pk=self.kwargs['pk'])
        except (Ticket.DoesNotExist, ValueError, ValidationError):
            raise TicketNotFoundError()

    def perform_create(self, serializer):
        ticket = serializer.save()
        logger.info(f"Ticket {ticket.pnr} created for account '{ticket.account}'")

    def destroy(self, request, *args, **kwargs):
        ticket = self.get_object()
        pnr = ticket.pnr
        ticket.delete()
        logger.info(f"Ticket {pnr} deleted")
        return Response({'message': 'Ticket deleted successfully'}, status=status.HTTP_200_OK)

    @extend_schema(request=RefundInputSerializer, responses={200: TicketSerializer})
    @action(detail=True, methods=['put'])
    def refund(self, request, pk=None):
        """
        Record a refund against a ticket.

        PUT /api/tickets/{id}/refund/
        Body: {"refund_amount": 100, "refund_date": "2025-01-31", "refund_reason": "..."}
        Missing values default to 0, today and an empty reason.
        """
        ticket = self.get_object()
        serializer = RefundInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        ticket.refund_amount = data.get('refund_amount') or 0
        ticket.refund_date = data.get('refund_date') or timezone.localdate()
        ticket.refund_reason = data.get('refund_reason') or ''
        ticket.save(update_fields=['refund_amount', 'refund_date', 'refund_reason', 'updated_at'])

        logger.info(f"Refund of {ticket.refund_amount} recorded on ticket {ticket.pnr}")
        return Response(TicketSerializer(ticket).data)

    @extend_schema(responses={200: ProfitSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """
        Profit grouped by ticket type.

        GET /api/tickets/summary/
        """
        data = TicketAnalytics.profit_summary()
        return Response(ProfitSummarySerializer(data).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('date_from', OpenApiTypes.DATE, description='Booking date from (YYYY-MM-DD)'),
            OpenApiParameter('date_to', OpenApiTypes.DATE, description='Booking date to (YYYY-MM-DD)'),
        ],
        responses={200: AccountOverviewSerializer},
    )
    @action(detail=False, methods=['get'])
    def accounts(self, request):
        """
        Outstanding dues per account over open tickets.

        GET /api/tickets/accounts/?date_from=...&date_to=...
        """
        window = BookingWindowSerializer(data=request.query_params)
        window.is_valid(raise_exception=True)

        data = TicketAnalytics.account_overview(
            date_from=window.validated_data.get('date_from'),
            date_to=window.validated_data.get('date_to'),
        )

        return Response(AccountOverviewSerializer(data).data)
