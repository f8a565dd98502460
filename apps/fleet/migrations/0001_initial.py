# Generated manually for fleet app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Vehicle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('type', models.CharField(choices=[('car', 'Car'), ('bike', 'Bike')], max_length=10)),
                ('color', models.CharField(default='#3b82f6', max_length=20)),
                ('model', models.CharField(blank=True, default='', max_length=100)),
                ('manufacturer_date', models.DateField(blank=True, null=True)),
                ('buy_date', models.DateField(blank=True, null=True)),
                ('fuel_type', models.CharField(choices=[('Petrol', 'Petrol'), ('Diesel', 'Diesel'), ('CNG', 'CNG'), ('Electric', 'Electric'), ('Hybrid', 'Hybrid')], default='Petrol', max_length=10)),
                ('fuel_capacity', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('license_plate', models.CharField(blank=True, db_index=True, default='', max_length=20)),
                ('chassis_number', models.CharField(blank=True, default='', max_length=50)),
                ('notes', models.TextField(blank=True, default='')),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'vehicles',
                'ordering': ['-created_at'],
                'unique_together': {('name', 'type')},
            },
        ),
        migrations.CreateModel(
            name='FuelEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(db_index=True)),
                ('vehicle_type', models.CharField(choices=[('car', 'Car'), ('bike', 'Bike')], max_length=10)),
                ('vehicle_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('vehicle_name', models.CharField(blank=True, default='', max_length=100)),
                ('entry_type', models.CharField(choices=[('refueling', 'Refueling'), ('service', 'Service'), ('repair', 'Repair')], max_length=10)),
                ('odometer', models.DecimalField(blank=True, decimal_places=1, max_digits=10, null=True)),
                ('liters', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('price_per_liter', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('total', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('station', models.CharField(blank=True, default='', max_length=200)),
                ('notes', models.TextField(blank=True, default='')),
                ('missed_previous_refuel', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'fuel_entries',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['vehicle_type', 'date'], name='fuel_type_date_idx'),
                    models.Index(fields=['entry_type'], name='fuel_entry_type_idx'),
                ],
            },
        ),
    ]
