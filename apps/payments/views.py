import logging

from django.core.exceptions import ValidationError
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import Payment
from .serializers import (
    PaymentSerializer,
    MarkPaidInputSerializer,
    ClearPartialResponseSerializer,
)
from .services import mark_tickets_paid, clear_partial_payments
from .exceptions import PaymentServiceError, PaymentNotFoundError

logger = logging.getLogger(__name__)


class PaymentViewSet(mixins.ListModelMixin,
                     mixins.CreateModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.DestroyModelMixin,
                     viewsets.GenericViewSet):
    """
    Payments received from accounts.

    list: Payments, newest date first
    create: Record a payment (date, amount and period required)
    retrieve: Get a payment
    destroy: Delete a payment
    """

    queryset = Payment.objects.order_by('-date', '-created_at')
    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        try:
            return Payment.objects.get(pk=self.kwargs['pk'])
        except (Payment.DoesNotExist, ValueError, ValidationError):
            raise PaymentNotFoundError()

    def perform_create(self, serializer):
        payment = serializer.save()
        logger.info(f"Payment {payment.id} of {payment.amount} recorded ({payment.period})")

    def destroy(self, request, *args, **kwargs):
        payment = self.get_object()
        payment.delete()
        return Response({'message': 'Payment deleted successfully'}, status=status.HTTP_200_OK)

    @extend_schema(request=MarkPaidInputSerializer, responses={201: PaymentSerializer})
    @action(detail=False, methods=['post'], url_path='mark-paid')
    def mark_paid(self, request):
        """
        Settle tickets with a single payment.

        POST /api/payments/mark-paid/
        Body: {"tickets": ["<uuid>", ...], "date": "2025-01-31"}
        """
        serializer = MarkPaidInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment = mark_tickets_paid(
                ticket_ids=serializer.validated_data['tickets'],
                paid_on=serializer.validated_data.get('date'),
            )
        except PaymentServiceError as e:
            return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ClearPartialResponseSerializer},
    description="Delete every partial payment recorded for an account.",
    tags=['payments'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def clear_partials(request, account):
    result = clear_partial_payments(account=account)
    return Response(ClearPartialResponseSerializer(result).data)
