# ==========================================
# apps/notes/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Note


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ['title', 'format', 'color_swatch', 'pinned', 'owner', 'created_at']
    list_filter = ['format', 'pinned', 'created_at']
    search_fields = ['title', 'content', 'owner__username']
    ordering = ['-pinned', '-created_at']
    readonly_fields = ['created_at', 'updated_at']

    def color_swatch(self, obj):
        if not obj.color:
            return '-'
        return format_html(
            '<span style="display: inline-block; width: 14px; height: 14px; '
            'border-radius: 3px; background: {};"></span>',
            obj.color
        )
    color_swatch.short_description = 'Color'

    actions = ['pin_notes', 'unpin_notes']

    @admin.action(description='Pin selected notes')
    def pin_notes(self, request, queryset):
        count = queryset.update(pinned=True)
        self.message_user(request, f'Pinned {count} note(s).')

    @admin.action(description='Unpin selected notes')
    def unpin_notes(self, request, queryset):
        count = queryset.update(pinned=False)
        self.message_user(request, f'Unpinned {count} note(s).')
