"""
Program families.

A family bundles everything the back office needs to manage one kind of
program and its applications: models, the create/edit form, which fields the
search box and the secondary filter look at, the CSV layout and the review
rules. Views and services take a family instead of hard-coding a program type.
"""
from dataclasses import dataclass

from django.conf import settings
from django.db.models import Count
from django.http import Http404

from applications import workflow
from applications.forms import HackathonApplicationForm, IncubationApplicationForm
from applications.models import HackathonApplication, IncubationApplication
from applications.serializers import HackathonApplicationSerializer, IncubationApplicationSerializer
from .forms import HackathonForm, IncubationProgramForm
from .models import Hackathon, IncubationProgram
from .serializers import HackathonSerializer, IncubationProgramSerializer


@dataclass(frozen=True)
class ProgramFamily:
    slug: str
    program_label: str
    label: str
    public_path: str
    program_model: type
    program_form: type
    application_model: type
    application_form: type
    program_serializer: type
    application_serializer: type
    program_fk: str
    applicant_name_field: str
    application_search_fields: tuple
    category_field: str
    category_choices: tuple
    initial_status: str
    statuses: tuple
    stamps_reviewed_at: bool
    csv_columns: tuple
    status_email_type: str
    confirmation_email_type: str
    featured_title_setting: str = ''
    program_search_fields: tuple = ('title', 'subtitle', 'location')

    def applicant_name(self, application):
        return getattr(application, self.applicant_name_field, '')

    @property
    def featured_title(self):
        if not self.featured_title_setting:
            return None
        return getattr(settings, self.featured_title_setting, None)

    def is_featured(self, program):
        """Featured programs are pinned first and can never be deleted"""
        return bool(program.is_default) or (
            self.featured_title is not None and program.title == self.featured_title
        )

    def sort_programs(self, programs):
        """Featured first, then newest created first"""
        by_newest = sorted(programs, key=lambda program: program.created_at, reverse=True)
        return sorted(by_newest, key=lambda program: not self.is_featured(program))

    def program_queryset(self):
        return self.program_model.objects.annotate(application_count=Count('applications'))

    def applications_for(self, program):
        return (
            self.application_model.objects.filter(**{self.program_fk: program})
            .select_related(self.program_fk)
            .order_by('-created_at')
        )

    def program_of(self, application):
        return getattr(application, self.program_fk)

    def status_choices(self):
        labels = dict(self.application_model.STATUS_CHOICES)
        return [(status, labels.get(status, status)) for status in self.statuses]


HACKATHONS = ProgramFamily(
    slug='hackathons',
    program_label='Hackathon',
    label='Hackathon Registration',
    public_path='hackathon',
    program_model=Hackathon,
    program_form=HackathonForm,
    application_model=HackathonApplication,
    application_form=HackathonApplicationForm,
    program_serializer=HackathonSerializer,
    application_serializer=HackathonApplicationSerializer,
    program_fk='hackathon',
    applicant_name_field='full_name',
    application_search_fields=('full_name', 'email', 'city', 'college'),
    category_field='experience',
    category_choices=tuple(HackathonApplication.EXPERIENCE_CHOICES),
    initial_status=workflow.PENDING,
    statuses=(workflow.PENDING, workflow.UNDER_REVIEW, workflow.APPROVED, workflow.REJECTED, workflow.WAITLISTED),
    stamps_reviewed_at=False,
    csv_columns=(
        ('Name', 'full_name'),
        ('Email', 'email'),
        ('Phone', 'phone'),
        ('City', 'city'),
        ('College', 'college'),
        ('Experience', 'experience'),
        ('Programming Languages', 'programming_languages'),
        ('Team Name', 'team_name'),
        ('Project Idea', 'project_idea'),
        ('Status', 'status'),
        ('Applied Date', 'created_at'),
    ),
    status_email_type='hackathon_status_update',
    confirmation_email_type='hackathon_registration',
    featured_title_setting='FEATURED_HACKATHON_TITLE',
)

INCUBATION = ProgramFamily(
    slug='incubation',
    program_label='Incubation Program',
    label='Incubation Application',
    public_path='incubation',
    program_model=IncubationProgram,
    program_form=IncubationProgramForm,
    application_model=IncubationApplication,
    application_form=IncubationApplicationForm,
    program_serializer=IncubationProgramSerializer,
    application_serializer=IncubationApplicationSerializer,
    program_fk='program',
    applicant_name_field='founder_name',
    application_search_fields=('founder_name', 'startup_name', 'email', 'industry'),
    category_field='stage',
    category_choices=tuple(IncubationApplication.STAGE_CHOICES),
    initial_status=workflow.SUBMITTED,
    statuses=(workflow.SUBMITTED, workflow.UNDER_REVIEW, workflow.APPROVED, workflow.REJECTED, workflow.WAITLISTED),
    stamps_reviewed_at=True,
    csv_columns=(
        ('Founder Name', 'founder_name'),
        ('Startup Name', 'startup_name'),
        ('Email', 'email'),
        ('Phone', 'phone'),
        ('Industry', 'industry'),
        ('Stage', 'stage'),
        ('Team Size', 'team_size'),
        ('Status', 'status'),
        ('Applied Date', 'created_at'),
    ),
    status_email_type='incubation_status_update',
    confirmation_email_type='incubation_application',
)

FAMILIES = {family.slug: family for family in (HACKATHONS, INCUBATION)}


def get_family(slug):
    try:
        return FAMILIES[slug]
    except KeyError:
        raise Http404(f"Unknown program type '{slug}'")
