from rest_framework import serializers
from .models import Payment


# =============================================================================
# Input Serializers
# =============================================================================

class MarkPaidInputSerializer(serializers.Serializer):
    """
    Validate input for marking tickets as paid.

    Fields:
        tickets (list[UUID]): Tickets to settle
        date (date): Optional payment date, defaults to today
    """

    tickets = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
    date = serializers.DateField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class PaymentSerializer(serializers.ModelSerializer):
    tickets = serializers.ListField(child=serializers.UUIDField(), required=False)

    class Meta:
        model = Payment
        fields = [
            'id',
            'date',
            'amount',
            'period',
            'account',
            'tickets',
            'is_partial',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'account': {'required': False},
            'is_partial': {'required': False},
        }

    def validate_amount(self, value):
        if not value:
            raise serializers.ValidationError('Amount is required')
        return value

    def validate_tickets(self, value):
        return [str(ticket_id) for ticket_id in value]


class ClearPartialResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    deleted = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
