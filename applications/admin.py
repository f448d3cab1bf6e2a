from django.contrib import admin
from .models import HackathonApplication, IncubationApplication


@admin.register(HackathonApplication)
class HackathonApplicationAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'hackathon', 'experience', 'status', 'created_at']
    search_fields = ['full_name', 'email', 'city', 'college', 'hackathon__title']
    list_filter = ['status', 'experience', 'hackathon', 'created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at', 'reviewed_at']


@admin.register(IncubationApplication)
class IncubationApplicationAdmin(admin.ModelAdmin):
    list_display = ['startup_name', 'founder_name', 'email', 'program', 'stage', 'status', 'created_at']
    search_fields = ['startup_name', 'founder_name', 'email', 'industry', 'program__title']
    list_filter = ['status', 'stage', 'program', 'created_at']
    readonly_fields = ['external_id', 'created_at', 'updated_at', 'reviewed_at', 'reviewed_by']
