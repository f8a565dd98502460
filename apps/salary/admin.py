# ==========================================
# apps/salary/admin.py
# ==========================================

from django.contrib import admin
from .models import SalaryRecord


@admin.register(SalaryRecord)
class SalaryRecordAdmin(admin.ModelAdmin):
    list_display = [
        'year',
        'previous_salary',
        'hike_percentage',
        'revision_percentage',
        'final_salary',
        'total_percentage',
        'bonus_amount',
    ]

    search_fields = ['notes']
    ordering = ['-year']

    readonly_fields = ['revision_amount', 'total_percentage', 'final_salary', 'bonus_amount',
                       'components', 'created_at', 'updated_at']

    fieldsets = (
        ('Inputs', {
            'fields': ('year', 'previous_salary', 'hike_percentage', 'revision_percentage',
                       'bonus_percentage', 'effective_date', 'notes')
        }),
        ('Derived', {
            'fields': ('revision_amount', 'total_percentage', 'final_salary', 'bonus_amount', 'components'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
