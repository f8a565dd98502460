from rest_framework import serializers
from .models import Ticket, TicketType


# =============================================================================
# Input Serializers
# =============================================================================

class BookingWindowSerializer(serializers.Serializer):
    """Booking date window; both bounds inclusive and optional."""

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'End date must be after start date'
            })

        return attrs


class TicketFilterSerializer(BookingWindowSerializer):
    """
    Validate query parameters for ticket filtering.

    Query Parameters:
        account (str): Exact account name
        type (str): train, bus or flight
        date_from (date): Booking date lower bound (inclusive)
        date_to (date): Booking date upper bound (inclusive)
    """

    account = serializers.CharField(required=False)
    type = serializers.ChoiceField(choices=TicketType.choices, required=False)


class RefundInputSerializer(serializers.Serializer):
    """Refund details; every field is optional."""

    refund_amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    refund_date = serializers.DateField(required=False, allow_null=True)
    refund_reason = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class TicketSerializer(serializers.ModelSerializer):

    class Meta:
        model = Ticket
        fields = [
            'id',
            'amount',
            'profit',
            'type',
            'service',
            'account',
            'booking_date',
            'passenger_name',
            'place',
            'pnr',
            'fare',
            'refund',
            'remarks',
            'refund_amount',
            'refund_date',
            'refund_reason',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class ProfitSummarySerializer(serializers.Serializer):
    train = serializers.DecimalField(max_digits=14, decimal_places=2)
    bus = serializers.DecimalField(max_digits=14, decimal_places=2)
    flight = serializers.DecimalField(max_digits=14, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_tickets = serializers.IntegerField()


class AccountRowSerializer(serializers.Serializer):
    account = serializers.CharField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    fare = serializers.DecimalField(max_digits=14, decimal_places=2)
    refund = serializers.DecimalField(max_digits=14, decimal_places=2)
    partial = serializers.DecimalField(max_digits=14, decimal_places=2)
    due = serializers.DecimalField(max_digits=14, decimal_places=2)
    profit = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()


class AccountTotalsSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    fare = serializers.DecimalField(max_digits=14, decimal_places=2)
    refund = serializers.DecimalField(max_digits=14, decimal_places=2)
    partial = serializers.DecimalField(max_digits=14, decimal_places=2)
    due = serializers.DecimalField(max_digits=14, decimal_places=2)
    profit = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()


class AccountOverviewSerializer(serializers.Serializer):
    accounts = AccountRowSerializer(many=True)
    totals = AccountTotalsSerializer()
