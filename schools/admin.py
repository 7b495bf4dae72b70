from django.contrib import admin
from django.utils.html import format_html
from import_export.admin import ImportExportModelAdmin

from .models import School
from .resources import SchoolResource


@admin.register(School)
class SchoolAdmin(ImportExportModelAdmin):
    resource_class = SchoolResource
    list_display = ('name', 'city', 'state', 'contact', 'email_id', 'image_preview', 'created_at')
    list_filter = ('state', 'city')
    search_fields = ('name', 'city', 'email_id')
    date_hierarchy = 'created_at'
    readonly_fields = ('image_preview', 'created_at')
    fieldsets = (
        (None, {
            'fields': ('name', 'address', 'city', 'state', 'contact', 'email_id')
        }),
        ('Image', {
            'fields': ('image', 'image_preview'),
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',),
        }),
    )

    def image_preview(self, obj):
        if not obj.image:
            return "-"
        return format_html('<img src="{}" alt="{}" style="max-height: 60px;">', obj.image_url, obj.name)
    image_preview.short_description = "Preview"
