from django import forms
from django.core.exceptions import ValidationError
from .models import Hackathon, IncubationProgram


class TagsField(forms.Field):
    """Accepts a list of strings or a comma-separated string"""

    def to_python(self, value):
        if value in (None, ''):
            return []
        if isinstance(value, (list, tuple)):
            items = value
        else:
            items = str(value).split(',')
        return [str(item).strip() for item in items if str(item).strip()]


class ProgramForm(forms.ModelForm):
    """
    Create/edit form shared by every program family.

    The same form serves creation and editing: bind it to an instance to edit.
    Nothing is written unless every rule below passes.
    """
    tags = TagsField(required=False)

    required_fields = ('title', 'description', 'start_date', 'end_date', 'location')
    numeric_defaults = {}
    window_label = 'Registration'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            field.required = name in self.required_fields
        if self.is_bound and self.instance.pk:
            self._keep_omitted_flags()

    def _keep_omitted_flags(self):
        """A checkbox absent from an edit request keeps its stored value"""
        omitted = [
            name for name, field in self.fields.items()
            if isinstance(field, forms.BooleanField) and name not in self.data
        ]
        if not omitted:
            return
        data = self.data.copy()
        for name in omitted:
            data[name] = getattr(self.instance, name)
        self.data = data

    def clean_status(self):
        return self.cleaned_data.get('status') or 'draft'

    def clean(self):
        cleaned_data = super().clean()

        for name, default in self.numeric_defaults.items():
            if cleaned_data.get(name) is None:
                cleaned_data[name] = default

        missing = [name for name in self.required_fields if name in self.errors and not self.data.get(name)]
        if missing:
            raise ValidationError("Please fill in all required fields")

        errors = []
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')
        if start_date and end_date and start_date >= end_date:
            errors.append(ValidationError("Start date must be before end date", code='start_after_end'))

        model = self._meta.model
        window_open = cleaned_data.get(model.window_open_field)
        window_close = cleaned_data.get(model.window_close_field)
        if window_open and window_close and window_open >= window_close:
            errors.append(ValidationError(
                f"{self.window_label} open date must be before close date", code='window_order'
            ))

        errors.extend(self.extra_date_errors(cleaned_data))

        if errors:
            raise ValidationError(errors)
        return cleaned_data

    def extra_date_errors(self, cleaned_data):
        return []


class HackathonForm(ProgramForm):
    required_fields = ProgramForm.required_fields + ('subtitle',)
    numeric_defaults = {'expected_participants': 100}
    window_label = 'Registration'

    class Meta:
        model = Hackathon
        fields = [
            'title', 'subtitle', 'description', 'start_date', 'end_date',
            'registration_open_date', 'registration_close_date', 'location',
            'prize_pool', 'expected_participants', 'tags', 'cover_image_url',
            'status', 'published', 'is_default',
        ]


class IncubationProgramForm(ProgramForm):
    numeric_defaults = {'expected_startups': 20}
    window_label = 'Application'

    class Meta:
        model = IncubationProgram
        fields = [
            'title', 'subtitle', 'description', 'start_date', 'end_date',
            'application_open_date', 'application_close_date', 'location',
            'duration', 'equity_requirement', 'funding_amount', 'expected_startups',
            'tags', 'cover_image_url', 'status', 'published', 'is_default',
        ]

    def extra_date_errors(self, cleaned_data):
        start_date = cleaned_data.get('start_date')
        application_open = cleaned_data.get('application_open_date')
        if application_open and start_date and application_open >= start_date:
            return [ValidationError("Application open date must be before program start date", code='window_after_start')]
        return []
