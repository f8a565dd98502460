from rest_framework import serializers
from .models import Name, Customer, Gender


class NameSerializer(serializers.ModelSerializer):

    class Meta:
        model = Name
        fields = ['id', 'name', 'age', 'dob', 'account', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class CustomerSerializer(serializers.ModelSerializer):
    """Customer details; gender is accepted in any case."""

    gender = serializers.CharField(required=False, default=Gender.FEMALE)

    class Meta:
        model = Customer
        fields = [
            'id',
            'name',
            'age',
            'dob',
            'account',
            'gender',
            'aadhar_number',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_gender(self, value):
        value = value.strip().lower()
        if value not in Gender.values:
            raise serializers.ValidationError('Gender must be male or female')
        return value
