from rest_framework import serializers
from .models import Hackathon, IncubationProgram

PROGRAM_FIELDS = [
    'external_id', 'title', 'subtitle', 'description', 'start_date', 'end_date',
    'location', 'tags', 'cover_image_url', 'status', 'published', 'is_default',
    'created_at', 'updated_at',
]


class ProgramSerializer(serializers.ModelSerializer):
    """Read-only representation; writes go through the program forms"""
    application_count = serializers.SerializerMethodField()
    is_accepting_applications = serializers.SerializerMethodField()

    def get_application_count(self, obj):
        count = getattr(obj, 'application_count', None)
        if count is None:
            count = obj.applications.count()
        return count

    def get_is_accepting_applications(self, obj):
        return obj.is_accepting_applications()


class HackathonSerializer(ProgramSerializer):
    class Meta:
        model = Hackathon
        fields = PROGRAM_FIELDS + [
            'registration_open_date', 'registration_close_date', 'prize_pool',
            'expected_participants', 'application_count', 'is_accepting_applications',
        ]
        read_only_fields = fields


class IncubationProgramSerializer(ProgramSerializer):
    class Meta:
        model = IncubationProgram
        fields = PROGRAM_FIELDS + [
            'application_open_date', 'application_close_date', 'duration',
            'equity_requirement', 'funding_amount', 'expected_startups',
            'application_count', 'is_accepting_applications',
        ]
        read_only_fields = fields
