# Generated manually for salary app

import uuid
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SalaryRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('year', models.PositiveIntegerField(unique=True)),
                ('previous_salary', models.DecimalField(decimal_places=2, max_digits=12)),
                ('hike_percentage', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=6)),
                ('revision_percentage', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=6)),
                ('revision_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('total_percentage', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=6)),
                ('final_salary', models.DecimalField(decimal_places=2, max_digits=12)),
                ('bonus_percentage', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=6)),
                ('bonus_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('components', models.JSONField(blank=True, default=dict)),
                ('notes', models.TextField(blank=True, default='')),
                ('effective_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'salary_records',
                'ordering': ['-year'],
            },
        ),
    ]
