from django.db import models
import uuid


class VehicleType(models.TextChoices):
    CAR = 'car', 'Car'
    BIKE = 'bike', 'Bike'


class FuelType(models.TextChoices):
    PETROL = 'Petrol', 'Petrol'
    DIESEL = 'Diesel', 'Diesel'
    CNG = 'CNG', 'CNG'
    ELECTRIC = 'Electric', 'Electric'
    HYBRID = 'Hybrid', 'Hybrid'


class EntryType(models.TextChoices):
    REFUELING = 'refueling', 'Refueling'
    SERVICE = 'service', 'Service'
    REPAIR = 'repair', 'Repair'


class Vehicle(models.Model):
    """A named car or bike that fuel entries can be logged against."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    type = models.CharField(max_length=10, choices=VehicleType.choices)
    color = models.CharField(max_length=20, default='#3b82f6')
    model = models.CharField(max_length=100, blank=True, default='')

    # Stored as the first day of the month
    manufacturer_date = models.DateField(null=True, blank=True)
    buy_date = models.DateField(null=True, blank=True)

    fuel_type = models.CharField(max_length=10, choices=FuelType.choices, default=FuelType.PETROL)
    fuel_capacity = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    license_plate = models.CharField(max_length=20, blank=True, default='', db_index=True)
    chassis_number = models.CharField(max_length=50, blank=True, default='')
    notes = models.TextField(blank=True, default='')
    active = models.BooleanField(default=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vehicles'
        ordering = ['-created_at']
        unique_together = [('name', 'type')]

    def __str__(self):
        return f"{self.name} ({self.type})"


class FuelEntry(models.Model):
    """
    Refuel, service or repair logged for a vehicle.

    ``vehicle_id`` is a plain column, not a foreign key: removing a vehicle
    never touches its log. Distance and mileage are derived on read.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField(db_index=True)
    vehicle_type = models.CharField(max_length=10, choices=VehicleType.choices)
    vehicle_id = models.UUIDField(null=True, blank=True, db_index=True)
    vehicle_name = models.CharField(max_length=100, blank=True, default='')
    entry_type = models.CharField(max_length=10, choices=EntryType.choices)

    odometer = models.DecimalField(max_digits=10, decimal_places=1, null=True, blank=True)
    liters = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    price_per_liter = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    total = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    station = models.CharField(max_length=200, blank=True, default='')
    notes = models.TextField(blank=True, default='')
    # The refuel before this one was not logged, so it starts a new baseline
    missed_previous_refuel = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'fuel_entries'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['vehicle_type', 'date'], name='fuel_type_date_idx'),
            models.Index(fields=['entry_type'], name='fuel_entry_type_idx'),
        ]

    def __str__(self):
        label = self.vehicle_name or self.vehicle_type
        return f"{self.date} {label} {self.entry_type}"
