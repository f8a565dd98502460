# ==========================================
# apps/customers/admin.py
# ==========================================

from django.contrib import admin
from .models import Name, Customer


@admin.register(Name)
class NameAdmin(admin.ModelAdmin):
    list_display = ['name', 'age', 'dob', 'account', 'created_at']
    search_fields = ['name', 'account']
    ordering = ['-created_at']


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['name', 'gender', 'age', 'account', 'aadhar_number', 'created_at']
    list_filter = ['gender']
    search_fields = ['name', 'account', 'aadhar_number']
    ordering = ['-created_at']
    readonly_fields = ['created_at', 'updated_at']
