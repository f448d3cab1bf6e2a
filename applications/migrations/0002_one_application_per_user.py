from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('applications', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='hackathonapplication',
            constraint=models.UniqueConstraint(
                condition=models.Q(user__isnull=False),
                fields=('hackathon', 'user'),
                name='unique_hackathon_registration_per_user',
            ),
        ),
        migrations.AddConstraint(
            model_name='incubationapplication',
            constraint=models.UniqueConstraint(
                condition=models.Q(user__isnull=False),
                fields=('program', 'user'),
                name='unique_incubation_application_per_user',
            ),
        ),
    ]
