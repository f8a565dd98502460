from rest_framework import serializers
from .models import SalaryRecord


# =============================================================================
# Input Serializers
# =============================================================================

class SalaryInputSerializer(serializers.Serializer):
    """
    Inputs of a salary record; every derived figure is computed server-side.

    ``previous_salary`` may be omitted when an earlier year exists.
    """

    year = serializers.IntegerField(min_value=1900, max_value=2100)
    previous_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    hike_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False)
    revision_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False)
    bonus_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    effective_date = serializers.DateField(required=False, allow_null=True)


class SalaryCalculateSerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=1900, max_value=2100, required=False)
    previous_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    hike_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False, default=0)
    revision_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False, default=0)
    bonus_percentage = serializers.DecimalField(max_digits=6, decimal_places=2, required=False, default=0)

    def validate(self, attrs):
        if 'year' not in attrs and 'previous_salary' not in attrs:
            raise serializers.ValidationError('Provide previous_salary or year')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class SalaryRecordSerializer(serializers.ModelSerializer):

    class Meta:
        model = SalaryRecord
        fields = [
            'id',
            'year',
            'previous_salary',
            'hike_percentage',
            'revision_percentage',
            'revision_amount',
            'total_percentage',
            'final_salary',
            'bonus_percentage',
            'bonus_amount',
            'components',
            'notes',
            'effective_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SalaryCalculationSerializer(serializers.Serializer):
    """Preview of derived salary figures."""

    previous_salary = serializers.DecimalField(max_digits=12, decimal_places=2)
    hike_percentage = serializers.DecimalField(max_digits=6, decimal_places=2)
    hike_amount = serializers.IntegerField()
    revision_percentage = serializers.DecimalField(max_digits=6, decimal_places=2)
    revision_amount = serializers.IntegerField()
    total_percentage = serializers.DecimalField(max_digits=6, decimal_places=2)
    final_salary = serializers.IntegerField()
    bonus_percentage = serializers.DecimalField(max_digits=6, decimal_places=2)
    bonus_amount = serializers.IntegerField()
    components = serializers.DictField(child=serializers.DictField(child=serializers.IntegerField()))
