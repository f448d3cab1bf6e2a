import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


APPLICATION_STATUS_CHOICES = [
    ('pending', 'Pending'),
    ('submitted', 'Submitted'),
    ('under_review', 'Under Review'),
    ('approved', 'Approved'),
    ('rejected', 'Rejected'),
    ('waitlisted', 'Waitlisted'),
]


def application_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('external_id', models.UUIDField(db_index=True, default=uuid.uuid4, unique=True)),
        ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('email', models.EmailField(db_index=True, max_length=254)),
        ('phone', models.CharField(blank=True, max_length=50, null=True)),
        ('linkedin_profile', models.URLField(blank=True, max_length=500, null=True)),
        ('status', models.CharField(choices=APPLICATION_STATUS_CHOICES, db_index=True, max_length=20)),
        ('admin_notes', models.TextField(blank=True, null=True)),
        ('reviewed_at', models.DateTimeField(blank=True, help_text='Set when an operator changes the status', null=True)),
        ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('programs', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='HackathonApplication',
            fields=application_fields() + [
                ('full_name', models.CharField(db_index=True, max_length=255)),
                ('age', models.CharField(blank=True, max_length=10, null=True)),
                ('city', models.CharField(blank=True, max_length=100, null=True)),
                ('college', models.CharField(blank=True, max_length=255, null=True)),
                ('graduation', models.CharField(blank=True, max_length=50, null=True)),
                ('programming_languages', models.CharField(blank=True, max_length=500, null=True)),
                ('experience', models.CharField(blank=True, choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('advanced', 'Advanced')], db_index=True, max_length=20, null=True)),
                ('frameworks', models.CharField(blank=True, max_length=500, null=True)),
                ('specialization', models.CharField(blank=True, max_length=255, null=True)),
                ('github_profile', models.URLField(blank=True, max_length=500, null=True)),
                ('portfolio', models.URLField(blank=True, max_length=500, null=True)),
                ('team_name', models.CharField(blank=True, max_length=255, null=True)),
                ('team_size', models.CharField(blank=True, max_length=20, null=True)),
                ('project_idea', models.TextField(blank=True, null=True)),
                ('dietary_requirements', models.CharField(blank=True, max_length=255, null=True)),
                ('accommodation', models.BooleanField(default=False)),
                ('agreements', models.BooleanField(default=False)),
                ('hackathon', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='programs.hackathon')),
            ],
            options={
                'db_table': 'hackathon_registrations',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['hackathon', 'status'], name='hackathon_reg_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='IncubationApplication',
            fields=application_fields() + [
                ('founder_name', models.CharField(db_index=True, max_length=255)),
                ('cofounder_name', models.CharField(blank=True, max_length=255, null=True)),
                ('education', models.CharField(blank=True, max_length=255, null=True)),
                ('experience', models.TextField(blank=True, null=True)),
                ('startup_name', models.CharField(db_index=True, max_length=255)),
                ('website', models.URLField(blank=True, max_length=500, null=True)),
                ('stage', models.CharField(choices=[('idea', 'Idea Stage'), ('mvp', 'MVP'), ('early_traction', 'Early Traction'), ('scaling', 'Scaling')], db_index=True, max_length=20)),
                ('industry', models.CharField(max_length=100)),
                ('description', models.TextField()),
                ('problem_statement', models.TextField()),
                ('solution_description', models.TextField()),
                ('target_market', models.TextField()),
                ('business_model', models.TextField(blank=True, null=True)),
                ('current_traction', models.TextField(blank=True, null=True)),
                ('funding_requirements', models.TextField(blank=True, null=True)),
                ('team_size', models.PositiveIntegerField(blank=True, null=True)),
                ('pitch_deck_url', models.URLField(blank=True, max_length=500, null=True)),
                ('decision_note', models.TextField(blank=True, null=True)),
                ('program', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='programs.incubationprogram')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'incubation_applications_new',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['program', 'status'], name='incubation_app_status_idx')],
            },
        ),
    ]
