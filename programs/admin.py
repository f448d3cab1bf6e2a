from django.contrib import admin
from .models import Hackathon, IncubationProgram


@admin.register(Hackathon)
class HackathonAdmin(admin.ModelAdmin):
    list_display = ['title', 'location', 'start_date', 'status', 'published', 'is_default', 'created_at']
    search_fields = ['title', 'subtitle', 'location']
    list_filter = ['status', 'published', 'is_default', 'created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at']


@admin.register(IncubationProgram)
class IncubationProgramAdmin(admin.ModelAdmin):
    list_display = ['title', 'location', 'start_date', 'status', 'published', 'is_default', 'created_at']
    search_fields = ['title', 'subtitle', 'location']
    list_filter = ['status', 'published', 'is_default', 'created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at']
