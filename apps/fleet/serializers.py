from rest_framework import serializers
from .models import Vehicle, FuelEntry, VehicleType, EntryType
from .services import parse_month_year, InvalidMonthYearError


class MonthYearField(serializers.Field):
    """Accepts MM-YYYY or YYYY-MM and stores the first day of that month."""

    def to_internal_value(self, data):
        try:
            return parse_month_year(data)
        except InvalidMonthYearError as e:
            raise serializers.ValidationError(str(e))

    def to_representation(self, value):
        return value.isoformat() if value else None


# =============================================================================
# Input Serializers
# =============================================================================

class VehicleFilterSerializer(serializers.Serializer):
    include_inactive = serializers.BooleanField(required=False, default=False)


class VehicleDeleteSerializer(serializers.Serializer):
    mode = serializers.ChoiceField(choices=['soft', 'hard'], required=False, default='soft')


class FuelFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for fuel entry filtering.

    Query Parameters:
        vehicle (str): car or bike
        vehicle_id (UUID): Linked vehicle
        entry_type (str): refueling, service or repair
    """

    vehicle = serializers.ChoiceField(choices=VehicleType.choices, required=False)
    vehicle_id = serializers.UUIDField(required=False)
    entry_type = serializers.ChoiceField(choices=EntryType.choices, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class VehicleSerializer(serializers.ModelSerializer):
    manufacturer_date = MonthYearField(required=False, allow_null=True)

    class Meta:
        model = Vehicle
        fields = [
            'id',
            'name',
            'type',
            'color',
            'model',
            'manufacturer_date',
            'buy_date',
            'fuel_type',
            'fuel_capacity',
            'license_plate',
            'chassis_number',
            'notes',
            'active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class VehicleMinimalSerializer(serializers.ModelSerializer):

    class Meta:
        model = Vehicle
        fields = ['id', 'name', 'type', 'color']


class FuelEntrySerializer(serializers.ModelSerializer):
    """
    Fuel log row.

    ``distance`` and ``mileage`` are read from the ``mileage`` map in the
    serializer context and are null when no reading applies.
    """

    vehicle = serializers.ChoiceField(source='vehicle_type', choices=VehicleType.choices)
    distance = serializers.SerializerMethodField()
    mileage = serializers.SerializerMethodField()

    class Meta:
        model = FuelEntry
        fields = [
            'id',
            'date',
            'vehicle',
            'vehicle_id',
            'vehicle_name',
            'entry_type',
            'odometer',
            'liters',
            'price_per_liter',
            'total',
            'station',
            'notes',
            'missed_previous_refuel',
            'distance',
            'mileage',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def _reading(self, obj):
        return self.context.get('mileage', {}).get(obj.id)

    def get_distance(self, obj) -> float:
        reading = self._reading(obj)
        return float(reading.distance) if reading and reading.distance is not None else None

    def get_mileage(self, obj) -> float:
        reading = self._reading(obj)
        return float(reading.mileage) if reading and reading.mileage is not None else None

    def validate(self, attrs):
        entry_type = attrs.get('entry_type', getattr(self.instance, 'entry_type', None))
        if entry_type != EntryType.REFUELING:
            attrs['missed_previous_refuel'] = False

        vehicle_id = attrs.get('vehicle_id')
        if vehicle_id and not attrs.get('vehicle_name'):
            vehicle = Vehicle.objects.filter(id=vehicle_id).first()
            if vehicle is not None:
                attrs['vehicle_name'] = vehicle.name
        return attrs


class ServiceOverviewSerializer(serializers.Serializer):
    vehicle = VehicleMinimalSerializer()
    last_service = FuelEntrySerializer(allow_null=True)
    km_since_service = serializers.DecimalField(max_digits=10, decimal_places=1, allow_null=True)


class VehicleStatsSerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    refuel = serializers.DecimalField(max_digits=14, decimal_places=2)
    service = serializers.DecimalField(max_digits=14, decimal_places=2)
    distance = serializers.DecimalField(max_digits=12, decimal_places=1)
    entries_count = serializers.IntegerField()
    first_date = serializers.DateField(allow_null=True)
    last_date = serializers.DateField(allow_null=True)
    range_days = serializers.IntegerField()
    by_day = serializers.DecimalField(max_digits=14, decimal_places=2)
    by_km = serializers.DecimalField(max_digits=14, decimal_places=2)
    refuel_pct = serializers.DecimalField(max_digits=6, decimal_places=2)
    service_pct = serializers.DecimalField(max_digits=6, decimal_places=2)
    last_service = FuelEntrySerializer(allow_null=True)
    days_since_service = serializers.IntegerField(allow_null=True)


class SpendBucketSerializer(serializers.Serializer):
    liters = serializers.DecimalField(max_digits=12, decimal_places=2)
    fuel_spend = serializers.DecimalField(max_digits=14, decimal_places=2)
    service_spend = serializers.DecimalField(max_digits=14, decimal_places=2)


class PeriodSpendSerializer(serializers.Serializer):
    car = SpendBucketSerializer()
    bike = SpendBucketSerializer()


class FuelSummarySerializer(serializers.Serializer):
    current_month = PeriodSpendSerializer()
    last_month = PeriodSpendSerializer()
    year_to_date = PeriodSpendSerializer()
