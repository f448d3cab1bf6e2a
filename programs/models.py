from django.db import models
from django.utils import timezone
from core.models import BaseModel


class ProgramBase(BaseModel):
    """Fields shared by every program family (hackathons, incubation programs)"""
    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('published', 'Published'),
        ('cancelled', 'Cancelled'),
    ]

    title = models.CharField(max_length=255, db_index=True)
    subtitle = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField()
    start_date = models.DateTimeField(db_index=True)
    end_date = models.DateTimeField()
    location = models.CharField(max_length=255)
    tags = models.JSONField(default=list, blank=True)
    cover_image_url = models.URLField(max_length=500, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft', db_index=True)
    published = models.BooleanField(default=False, db_index=True, help_text="Hides the program from the public site when off, whatever the status")
    is_default = models.BooleanField(default=False, db_index=True, help_text="Featured program; pinned first and protected from deletion")
    created_by = models.ForeignKey('core.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='+')

    # Subclasses name their application window fields differently
    window_open_field = None
    window_close_field = None

    class Meta:
        abstract = True

    def __str__(self):
        return self.title

    @property
    def is_publicly_visible(self):
        return self.published and self.status == 'published'

    def application_window(self):
        return getattr(self, self.window_open_field), getattr(self, self.window_close_field)

    def is_accepting_applications(self, now=None):
        """Open for submissions: visible, and inside the window when one is set"""
        if not self.is_publicly_visible:
            return False
        now = now or timezone.now()
        opens, closes = self.application_window()
        if opens and now < opens:
            return False
        if closes and now > closes:
            return False
        return True


class Hackathon(ProgramBase):
    registration_open_date = models.DateTimeField(null=True, blank=True)
    registration_close_date = models.DateTimeField(null=True, blank=True)
    prize_pool = models.CharField(max_length=100, null=True, blank=True)
    expected_participants = models.PositiveIntegerField(default=100)

    window_open_field = 'registration_open_date'
    window_close_field = 'registration_close_date'

    class Meta:
        db_table = 'hackathons'
        ordering = ['-is_default', '-created_at']
        indexes = [
            models.Index(fields=['status', 'published'], name='hackathons_status_pub_idx'),
        ]


class IncubationProgram(ProgramBase):
    application_open_date = models.DateTimeField(null=True, blank=True)
    application_close_date = models.DateTimeField(null=True, blank=True)
    duration = models.CharField(max_length=100, null=True, blank=True)
    equity_requirement = models.CharField(max_length=100, null=True, blank=True)
    funding_amount = models.CharField(max_length=100, null=True, blank=True)
    expected_startups = models.PositiveIntegerField(default=20)

    window_open_field = 'application_open_date'
    window_close_field = 'application_close_date'

    class Meta:
        db_table = 'incubation_programs'
        ordering = ['-is_default', '-created_at']
        indexes = [
            models.Index(fields=['status', 'published'], name='incubation_status_pub_idx'),
        ]
