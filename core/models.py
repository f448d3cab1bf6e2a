import logging
import uuid
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.contrib.auth.base_user import BaseUserManager

logger = logging.getLogger(__name__)


class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)
        extra_fields.setdefault('username', email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', 'admin')
        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    ROLE_CHOICES = [
        ('user', 'User'),
        ('entrepreneur', 'Entrepreneur'),
        ('investor', 'Investor'),
        ('mentor', 'Mentor'),
        ('admin', 'Admin'),
    ]

    external_id = models.UUIDField(default=uuid.uuid4, unique=True, db_index=True)
    email = models.EmailField(unique=True, db_index=True)
    username = models.CharField(max_length=150, unique=True, db_index=True)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    company = models.CharField(max_length=255, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='user', db_index=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    objects = CustomUserManager()

    class Meta:
        db_table = 'profiles'

    def __str__(self):
        name = f"{self.first_name} {self.last_name}".strip()
        return f"{name} ({self.email})" if name else self.email

    @property
    def display_name(self):
        return f"{self.first_name} {self.last_name}".strip() or self.username or self.email

    @property
    def can_manage_programs(self):
        """Back office access: Django staff or the admin profile role"""
        return self.is_active and (self.is_staff or self.is_superuser or self.role == 'admin')


class BaseModel(models.Model):
    external_id = models.UUIDField(default=uuid.uuid4, unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class AuditLog(BaseModel):
    ACTION_CHOICES = [
        ('create', 'Create'),
        ('update', 'Update'),
        ('delete', 'Delete'),
        ('status_change', 'Status Change'),
        ('login', 'Login'),
        ('logout', 'Logout'),
    ]

    entity = models.CharField(max_length=100, db_index=True)
    entity_id = models.UUIDField(db_index=True)
    action = models.CharField(max_length=20, choices=ACTION_CHOICES, db_index=True)
    changed_by = models.ForeignKey('core.User', on_delete=models.SET_NULL, null=True, blank=True, db_index=True)
    changed_at = models.DateTimeField(auto_now_add=True, db_index=True)
    diff_json = models.JSONField(default=dict)

    class Meta:
        db_table = 'admin_activity_log'
        ordering = ['-changed_at']

    def __str__(self):
        return f"{self.entity} {self.action} - {self.changed_at}"


def create_audit_log(entity_name, entity_id, action, changed_by=None, diff_data=None):
    """Create an audit log entry. Failures are logged and never propagate."""
    if changed_by is not None and not getattr(changed_by, 'is_authenticated', False):
        changed_by = None

    try:
        return AuditLog.objects.create(
            entity=entity_name,
            entity_id=entity_id,
            action=action,
            changed_by=changed_by,
            diff_json=diff_data or {}
        )
    except Exception as e:
        logger.error(f"Error creating AuditLog: {e}")
        return None


class EmailLog(BaseModel):
    """Stores every notification attempt for tracking and audit purposes"""
    EMAIL_TYPE_CHOICES = [
        ('hackathon_registration', 'Hackathon Registration'),
        ('hackathon_status_update', 'Hackathon Status Update'),
        ('incubation_application', 'Incubation Application'),
        ('incubation_status_update', 'Incubation Status Update'),
        ('custom', 'Custom Email'),
    ]

    STATUS_CHOICES = [
        ('sent', 'Sent Successfully'),
        ('failed', 'Failed to Send'),
    ]

    recipient = models.EmailField(db_index=True)
    type = models.CharField(max_length=40, choices=EMAIL_TYPE_CHOICES, default='custom', db_index=True)
    subject = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='sent', db_index=True)
    error_message = models.TextField(null=True, blank=True)
    sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'email_logs'
        indexes = [
            models.Index(fields=['recipient', 'created_at'], name='email_logs_recipient_idx'),
            models.Index(fields=['type', 'status'], name='email_logs_type_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} to {self.recipient} ({self.status})"
