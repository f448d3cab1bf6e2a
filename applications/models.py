from django.db import models
from core.models import BaseModel
from programs.models import Hackathon, IncubationProgram


class ApplicationBase(BaseModel):
    """Applicant profile and review state shared by every application family"""
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('submitted', 'Submitted'),
        ('under_review', 'Under Review'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
        ('waitlisted', 'Waitlisted'),
    ]

    user = models.ForeignKey('core.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='+')
    email = models.EmailField(db_index=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    linkedin_profile = models.URLField(max_length=500, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, db_index=True)
    admin_notes = models.TextField(null=True, blank=True)
    reviewed_at = models.DateTimeField(null=True, blank=True, help_text="Set when an operator changes the status")

    initial_status = 'pending'

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self.status:
            self.status = self.initial_status
        super().save(*args, **kwargs)


class HackathonApplication(ApplicationBase):
    EXPERIENCE_CHOICES = [
        ('beginner', 'Beginner'),
        ('intermediate', 'Intermediate'),
        ('advanced', 'Advanced'),
    ]

    hackathon = models.ForeignKey(Hackathon, on_delete=models.CASCADE, related_name='applications', db_index=True)
    full_name = models.CharField(max_length=255, db_index=True)
    age = models.CharField(max_length=10, null=True, blank=True)
    city = models.CharField(max_length=100, null=True, blank=True)
    college = models.CharField(max_length=255, null=True, blank=True)
    graduation = models.CharField(max_length=50, null=True, blank=True)
    programming_languages = models.CharField(max_length=500, null=True, blank=True)
    experience = models.CharField(max_length=20, choices=EXPERIENCE_CHOICES, null=True, blank=True, db_index=True)
    frameworks = models.CharField(max_length=500, null=True, blank=True)
    specialization = models.CharField(max_length=255, null=True, blank=True)
    github_profile = models.URLField(max_length=500, null=True, blank=True)
    portfolio = models.URLField(max_length=500, null=True, blank=True)
    team_name = models.CharField(max_length=255, null=True, blank=True)
    team_size = models.CharField(max_length=20, null=True, blank=True)
    project_idea = models.TextField(null=True, blank=True)
    dietary_requirements = models.CharField(max_length=255, null=True, blank=True)
    accommodation = models.BooleanField(default=False)
    agreements = models.BooleanField(default=False)

    class Meta:
        db_table = 'hackathon_registrations'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['hackathon', 'status'], name='hackathon_reg_status_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['hackathon', 'user'],
                name='unique_hackathon_registration_per_user',
                condition=models.Q(user__isnull=False)
            )
        ]

    def __str__(self):
        return f"{self.full_name} - {self.hackathon.title} ({self.status})"


class IncubationApplication(ApplicationBase):
    STAGE_CHOICES = [
        ('idea', 'Idea Stage'),
        ('mvp', 'MVP'),
        ('early_traction', 'Early Traction'),
        ('scaling', 'Scaling'),
    ]

    program = models.ForeignKey(IncubationProgram, on_delete=models.CASCADE, related_name='applications', db_index=True)
    founder_name = models.CharField(max_length=255, db_index=True)
    cofounder_name = models.CharField(max_length=255, null=True, blank=True)
    education = models.CharField(max_length=255, null=True, blank=True)
    experience = models.TextField(null=True, blank=True)
    startup_name = models.CharField(max_length=255, db_index=True)
    website = models.URLField(max_length=500, null=True, blank=True)
    stage = models.CharField(max_length=20, choices=STAGE_CHOICES, db_index=True)
    industry = models.CharField(max_length=100)
    description = models.TextField()
    problem_statement = models.TextField()
    solution_description = models.TextField()
    target_market = models.TextField()
    business_model = models.TextField(null=True, blank=True)
    current_traction = models.TextField(null=True, blank=True)
    funding_requirements = models.TextField(null=True, blank=True)
    team_size = models.PositiveIntegerField(null=True, blank=True)
    pitch_deck_url = models.URLField(max_length=500, null=True, blank=True)
    reviewed_by = models.ForeignKey('core.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='+')
    decision_note = models.TextField(null=True, blank=True)

    initial_status = 'submitted'

    class Meta:
        db_table = 'incubation_applications_new'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['program', 'status'], name='incubation_app_status_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['program', 'user'],
                name='unique_incubation_application_per_user',
                condition=models.Q(user__isnull=False)
            )
        ]

    def __str__(self):
        return f"{self.startup_name} ({self.founder_name}) - {self.status}"
