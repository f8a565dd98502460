# ==========================================
# apps/payments/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):

    list_display = [
        'date',
        'amount',
        'account',
        'period',
        'partial_badge',
        'ticket_count',
    ]
    list_filter = ['is_partial', 'account', 'date']
    search_fields = ['account', 'period']
    ordering = ['-date']
    date_hierarchy = 'date'
    readonly_fields = ['id', 'created_at', 'updated_at']

    def partial_badge(self, obj):
        if obj.is_partial:
            return format_html(
                '<span style="background: #E5C49A; color: #2C1810; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Partial</span>'
            )
        return format_html(
            '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Full</span>'
        )
    partial_badge.short_description = 'Kind'
    partial_badge.admin_order_field = 'is_partial'

    def ticket_count(self, obj):
        return len(obj.tickets or [])
    ticket_count.short_description = 'Tickets'
