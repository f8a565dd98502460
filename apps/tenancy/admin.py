# ==========================================
# apps/tenancy/admin.py
# ==========================================

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html
from .models import Flat, Tenant, RentRecord


class TenantInline(admin.TabularInline):
    """Tenancy history inside a flat."""
    model = Tenant
    fk_name = 'flat'
    extra = 0
    fields = ['name', 'phone', 'start_date', 'end_date', 'rent_amount', 'active']
    readonly_fields = ['start_date', 'end_date', 'active']
    ordering = ['-start_date']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Flat)
class FlatAdmin(admin.ModelAdmin):

    list_display = ['number', 'current_tenant', 'notes', 'updated_at']
    search_fields = ['number', 'notes']
    ordering = ['number']
    readonly_fields = ['id', 'current_tenant', 'created_at', 'updated_at']
    inlines = [TenantInline]


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):

    list_display = ['name', 'flat', 'phone', 'start_date', 'end_date', 'rent_amount', 'active']
    list_filter = ['active', 'flat']
    search_fields = ['name', 'phone', 'aadhar_number']
    ordering = ['-start_date']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(RentRecord)
class RentRecordAdmin(admin.ModelAdmin):

    list_display = ['month', 'flat', 'tenant', 'amount', 'maintenance', 'paid_badge', 'paid_date']
    list_filter = ['paid', 'month', 'flat']
    search_fields = ['tenant__name', 'flat__number', 'month']
    ordering = ['-month']
    readonly_fields = ['id', 'created_at', 'updated_at']

    def paid_badge(self, obj):
        if obj.paid:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Paid</span>'
            )
        return format_html(
            '<span style="background: #E5C49A; color: #2C1810; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Due</span>'
        )
    paid_badge.short_description = 'Status'
    paid_badge.admin_order_field = 'paid'

    actions = ['mark_paid']

    @admin.action(description='Mark selected rents as paid today')
    def mark_paid(self, request, queryset):
        count = queryset.filter(paid=False).update(paid=True, paid_date=timezone.localdate())
        self.message_user(request, f'Marked {count} rent record(s) as paid.')
