from rest_framework import serializers
from .models import HackathonApplication, IncubationApplication

APPLICATION_FIELDS = [
    'external_id', 'email', 'phone', 'linkedin_profile', 'status', 'admin_notes',
    'reviewed_at', 'created_at', 'updated_at',
]


class HackathonApplicationSerializer(serializers.ModelSerializer):
    hackathon = serializers.UUIDField(source='hackathon.external_id', read_only=True)
    hackathon_title = serializers.CharField(source='hackathon.title', read_only=True)

    class Meta:
        model = HackathonApplication
        fields = APPLICATION_FIELDS + [
            'hackathon', 'hackathon_title', 'full_name', 'age', 'city', 'college',
            'graduation', 'programming_languages', 'experience', 'frameworks',
            'specialization', 'github_profile', 'portfolio', 'team_name', 'team_size',
            'project_idea', 'dietary_requirements', 'accommodation', 'agreements',
        ]
        read_only_fields = fields


class IncubationApplicationSerializer(serializers.ModelSerializer):
    program = serializers.UUIDField(source='program.external_id', read_only=True)
    program_title = serializers.CharField(source='program.title', read_only=True)
    reviewed_by = serializers.SerializerMethodField()

    class Meta:
        model = IncubationApplication
        fields = APPLICATION_FIELDS + [
            'program', 'program_title', 'founder_name', 'cofounder_name', 'education',
            'experience', 'startup_name', 'website', 'stage', 'industry', 'description',
            'problem_statement', 'solution_description', 'target_market', 'business_model',
            'current_traction', 'funding_requirements', 'team_size', 'pitch_deck_url',
            'reviewed_by', 'decision_note',
        ]
        read_only_fields = fields

    def get_reviewed_by(self, obj):
        return obj.reviewed_by.email if obj.reviewed_by_id else None
