from django import forms
from .models import HackathonApplication, IncubationApplication


class HackathonApplicationForm(forms.ModelForm):
    class Meta:
        model = HackathonApplication
        fields = [
            'full_name', 'email', 'phone', 'age', 'city', 'college', 'graduation',
            'programming_languages', 'experience', 'frameworks', 'specialization',
            'github_profile', 'linkedin_profile', 'portfolio', 'team_name', 'team_size',
            'project_idea', 'dietary_requirements', 'accommodation', 'agreements',
        ]

    def clean_agreements(self):
        agreements = self.cleaned_data.get('agreements')
        if not agreements:
            raise forms.ValidationError("You must accept the terms and conditions to register")
        return agreements


class IncubationApplicationForm(forms.ModelForm):
    class Meta:
        model = IncubationApplication
        fields = [
            'founder_name', 'cofounder_name', 'email', 'phone', 'linkedin_profile',
            'education', 'experience', 'startup_name', 'website', 'stage', 'industry',
            'description', 'problem_statement', 'solution_description', 'target_market',
            'business_model', 'current_traction', 'funding_requirements', 'team_size',
            'pitch_deck_url',
        ]

    def clean_team_size(self):
        team_size = self.cleaned_data.get('team_size')
        if team_size is not None and team_size < 1:
            raise forms.ValidationError("Team size must be at least 1")
        return team_size
