# Generated manually for tickets app

import uuid
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Ticket',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12)),
                ('profit', models.DecimalField(decimal_places=2, max_digits=12)),
                ('fare', models.DecimalField(decimal_places=2, max_digits=12)),
                ('refund', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('type', models.CharField(choices=[('train', 'Train'), ('bus', 'Bus'), ('flight', 'Flight')], max_length=10)),
                ('service', models.CharField(max_length=200)),
                ('account', models.CharField(db_index=True, max_length=200)),
                ('booking_date', models.DateField(db_index=True)),
                ('passenger_name', models.CharField(max_length=200)),
                ('place', models.CharField(max_length=200)),
                ('pnr', models.CharField(max_length=50)),
                ('remarks', models.TextField(blank=True, default='')),
                ('refund_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('refund_date', models.DateField(blank=True, null=True)),
                ('refund_reason', models.CharField(blank=True, default='', max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'tickets',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['account', 'booking_date'], name='tickets_account_date_idx'),
                    models.Index(fields=['type'], name='tickets_type_idx'),
                ],
            },
        ),
    ]
