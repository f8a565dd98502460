# ==========================================
# apps/tickets/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Ticket, TicketType


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    """Admin interface for tickets with refund highlighting."""

    list_display = [
        'pnr',
        'passenger_name',
        'type_badge',
        'account',
        'amount',
        'profit',
        'refund_display',
        'booking_date',
    ]

    list_filter = ['type', 'account', 'booking_date']
    search_fields = ['pnr', 'passenger_name', 'account', 'place']
    ordering = ['-created_at']
    date_hierarchy = 'booking_date'
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Booking', {
            'fields': ('type', 'service', 'account', 'booking_date', 'passenger_name', 'place', 'pnr')
        }),
        ('Money', {
            'fields': ('amount', 'fare', 'profit', 'refund', 'remarks'),
        }),
        ('Refund', {
            'fields': ('refund_amount', 'refund_date', 'refund_reason'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def type_badge(self, obj):
        colors = {
            TicketType.TRAIN: '#6B8E5E',
            TicketType.BUS: '#A47449',
            TicketType.FLIGHT: '#4A6FA5',
        }
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colors.get(obj.type, '#ccc'), obj.get_type_display()
        )
    type_badge.short_description = 'Type'
    type_badge.admin_order_field = 'type'

    def refund_display(self, obj):
        if obj.refund_amount:
            return format_html('<span style="color: #B85C5C;">{}</span>', obj.refund_amount)
        return '-'
    refund_display.short_description = 'Refunded'
