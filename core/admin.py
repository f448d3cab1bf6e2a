from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User, AuditLog, EmailLog


@admin.register(User)
class ProfileAdmin(UserAdmin):
    list_display = ['email', 'first_name', 'last_name', 'role', 'is_staff', 'is_active', 'created_at']
    search_fields = ['email', 'first_name', 'last_name', 'company']
    list_filter = ['role', 'is_staff', 'is_active', 'created_at']
    ordering = ['-created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at', 'last_login', 'date_joined']
    fieldsets = UserAdmin.fieldsets + (
        ('Profile', {'fields': ('phone', 'company', 'bio', 'role', 'external_id', 'created_at', 'updated_at')}),
    )


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['entity', 'action', 'changed_by', 'changed_at']
    search_fields = ['entity', 'entity_id', 'changed_by__email']
    list_filter = ['entity', 'action', 'changed_at']
    readonly_fields = ['external_id', 'entity', 'entity_id', 'action', 'changed_by', 'changed_at', 'diff_json']


@admin.register(EmailLog)
class EmailLogAdmin(admin.ModelAdmin):
    list_display = ['recipient', 'type', 'subject', 'status', 'sent_at', 'created_at']
    search_fields = ['recipient', 'subject']
    list_filter = ['type', 'status', 'created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at', 'sent_at', 'error_message']
