from rest_framework import serializers
from .models import Flat, Tenant, RentRecord

MONTH_PATTERN = r'^\d{4}-(0[1-9]|1[0-2])$'


# =============================================================================
# Input Serializers
# =============================================================================

class RentFilterSerializer(serializers.Serializer):
    month = serializers.RegexField(
        MONTH_PATTERN,
        required=False,
        error_messages={'invalid': 'Month must be YYYY-MM'}
    )


class TenantCreateSerializer(serializers.Serializer):
    """Input for moving a tenant into a flat."""

    flat_id = serializers.UUIDField()
    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    aadhar_number = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True, default=None)
    rent_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    deposit = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, default=0)

    def validate_rent_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError('Rent amount must be positive')
        return value


class RentUpsertSerializer(serializers.Serializer):
    flat_id = serializers.UUIDField()
    tenant_id = serializers.UUIDField()
    month = serializers.RegexField(MONTH_PATTERN, error_messages={'invalid': 'Month must be YYYY-MM'})
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    maintenance = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, default=0)
    paid = serializers.BooleanField(required=False, default=False)
    paid_date = serializers.DateField(required=False, allow_null=True, default=None)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_amount(self, value):
        if not value:
            raise serializers.ValidationError('Amount is required')
        return value


# =============================================================================
# Output Serializers
# =============================================================================

class TenantSummarySerializer(serializers.ModelSerializer):
    """Tenant without the flat, for nesting and history lists."""

    class Meta:
        model = Tenant
        fields = [
            'id',
            'name',
            'phone',
            'aadhar_number',
            'start_date',
            'end_date',
            'rent_amount',
            'deposit',
            'active',
        ]


class FlatMinimalSerializer(serializers.ModelSerializer):

    class Meta:
        model = Flat
        fields = ['id', 'number', 'notes']


class FlatSerializer(serializers.ModelSerializer):
    current_tenant = TenantSummarySerializer(read_only=True)

    class Meta:
        model = Flat
        fields = ['id', 'number', 'notes', 'current_tenant', 'created_at', 'updated_at']
        read_only_fields = ['id', 'current_tenant', 'created_at', 'updated_at']


class TenantSerializer(serializers.ModelSerializer):
    flat = FlatMinimalSerializer(read_only=True)

    class Meta:
        model = Tenant
        fields = [
            'id',
            'name',
            'phone',
            'aadhar_number',
            'start_date',
            'end_date',
            'rent_amount',
            'deposit',
            'flat',
            'active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'flat', 'created_at', 'updated_at']


class RentRecordSerializer(serializers.ModelSerializer):
    flat = FlatMinimalSerializer(read_only=True)
    tenant = TenantSummarySerializer(read_only=True)

    class Meta:
        model = RentRecord
        fields = [
            'id',
            'flat',
            'tenant',
            'month',
            'amount',
            'maintenance',
            'paid',
            'paid_date',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
