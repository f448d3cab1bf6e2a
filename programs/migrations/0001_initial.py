import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


PROGRAM_STATUS_CHOICES = [('draft', 'Draft'), ('published', 'Published'), ('cancelled', 'Cancelled')]


def program_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('external_id', models.UUIDField(db_index=True, default=uuid.uuid4, unique=True)),
        ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('title', models.CharField(db_index=True, max_length=255)),
        ('subtitle', models.CharField(blank=True, max_length=255, null=True)),
        ('description', models.TextField()),
        ('start_date', models.DateTimeField(db_index=True)),
        ('end_date', models.DateTimeField()),
        ('location', models.CharField(max_length=255)),
        ('tags', models.JSONField(blank=True, default=list)),
        ('cover_image_url', models.URLField(blank=True, max_length=500, null=True)),
        ('status', models.CharField(choices=PROGRAM_STATUS_CHOICES, db_index=True, default='draft', max_length=20)),
        ('published', models.BooleanField(db_index=True, default=False, help_text='Hides the program from the public site when off, whatever the status')),
        ('is_default', models.BooleanField(db_index=True, default=False, help_text='Featured program; pinned first and protected from deletion')),
        ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Hackathon',
            fields=program_fields() + [
                ('registration_open_date', models.DateTimeField(blank=True, null=True)),
                ('registration_close_date', models.DateTimeField(blank=True, null=True)),
                ('prize_pool', models.CharField(blank=True, max_length=100, null=True)),
                ('expected_participants', models.PositiveIntegerField(default=100)),
            ],
            options={
                'db_table': 'hackathons',
                'ordering': ['-is_default', '-created_at'],
                'indexes': [models.Index(fields=['status', 'published'], name='hackathons_status_pub_idx')],
            },
        ),
        migrations.CreateModel(
            name='IncubationProgram',
            fields=program_fields() + [
                ('application_open_date', models.DateTimeField(blank=True, null=True)),
                ('application_close_date', models.DateTimeField(blank=True, null=True)),
                ('duration', models.CharField(blank=True, max_length=100, null=True)),
                ('equity_requirement', models.CharField(blank=True, max_length=100, null=True)),
                ('funding_amount', models.CharField(blank=True, max_length=100, null=True)),
                ('expected_startups', models.PositiveIntegerField(default=20)),
            ],
            options={
                'db_table': 'incubation_programs',
                'ordering': ['-is_default', '-created_at'],
                'indexes': [models.Index(fields=['status', 'published'], name='incubation_status_pub_idx')],
            },
        ),
    ]
