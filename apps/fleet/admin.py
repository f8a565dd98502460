# ==========================================
# apps/fleet/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Vehicle, FuelEntry, EntryType


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    """Admin interface for vehicles."""

    list_display = [
        'color_swatch',
        'name',
        'type',
        'model',
        'fuel_type',
        'license_plate',
        'active_badge',
        'created_at',
    ]
    list_display_links = ['name']
    list_filter = ['type', 'fuel_type', 'active']
    search_fields = ['name', 'model', 'license_plate', 'chassis_number']
    ordering = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']

    def color_swatch(self, obj):
        return format_html(
            '<span style="display: inline-block; width: 14px; height: 14px; '
            'border-radius: 3px; background: {};"></span>',
            obj.color
        )
    color_swatch.short_description = ''

    def active_badge(self, obj):
        if obj.active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Retired</span>'
        )
    active_badge.short_description = 'Status'
    active_badge.admin_order_field = 'active'

    actions = ['reactivate_vehicles']

    @admin.action(description='Reactivate selected vehicles')
    def reactivate_vehicles(self, request, queryset):
        count = queryset.update(active=True)
        self.message_user(request, f'Reactivated {count} vehicle(s).')


@admin.register(FuelEntry)
class FuelEntryAdmin(admin.ModelAdmin):

    list_display = [
        'date',
        'vehicle_name',
        'vehicle_type',
        'entry_type_badge',
        'odometer',
        'liters',
        'total',
        'missed_previous_refuel',
    ]
    list_filter = ['vehicle_type', 'entry_type', 'missed_previous_refuel', 'date']
    search_fields = ['vehicle_name', 'station', 'notes']
    ordering = ['-date', '-created_at']
    date_hierarchy = 'date'
    readonly_fields = ['id', 'created_at', 'updated_at']

    def entry_type_badge(self, obj):
        colors = {
            EntryType.REFUELING: '#4A6FA5',
            EntryType.SERVICE: '#6B8E5E',
            EntryType.REPAIR: '#B85C5C',
        }
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colors.get(obj.entry_type, '#ccc'), obj.get_entry_type_display()
        )
    entry_type_badge.short_description = 'Type'
    entry_type_badge.admin_order_field = 'entry_type'
