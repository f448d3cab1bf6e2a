from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from programs.models import Hackathon, IncubationProgram


class Command(BaseCommand):
    help = 'Create the featured hackathon and incubation program if they do not exist yet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--unpublished',
            action='store_true',
            help='Create the programs as drafts instead of publishing them',
        )

    def handle(self, *args, **options):
        now = timezone.now()
        publish = not options['unpublished']
        status = 'published' if publish else 'draft'

        hackathon, created = Hackathon.objects.get_or_create(
            title=settings.FEATURED_HACKATHON_TITLE,
            defaults={
                'subtitle': 'Build the future in 48 hours',
                'description': 'Our flagship hackathon for student and early-career builders.',
                'start_date': now + timedelta(days=30),
                'end_date': now + timedelta(days=32),
                'registration_open_date': now,
                'registration_close_date': now + timedelta(days=25),
                'location': 'Inc Combinator Campus',
                'prize_pool': '$10,000',
                'tags': ['AI', 'Web3', 'Fintech'],
                'status': status,
                'published': publish,
                'is_default': True,
            }
        )
        self._report('hackathon', hackathon, created)

        program = IncubationProgram.objects.filter(is_default=True).first()
        created = False
        if program is None:
            program = IncubationProgram.objects.create(
                title='Inc Combinator Incubation Program',
                subtitle='Twelve weeks from idea to investor-ready',
                description='Mentorship, workspace and seed funding for early-stage founders.',
                start_date=now + timedelta(days=60),
                end_date=now + timedelta(days=144),
                application_open_date=now,
                application_close_date=now + timedelta(days=45),
                location='Inc Combinator Campus',
                duration='12 weeks',
                equity_requirement='5-7%',
                funding_amount='$50,000',
                tags=['Mentorship', 'Funding'],
                status=status,
                published=publish,
                is_default=True,
            )
            created = True
        self._report('incubation program', program, created)

    def _report(self, label, program, created):
        if created:
            self.stdout.write(self.style.SUCCESS(f'Created default {label}: {program.title}'))
        else:
            self.stdout.write(self.style.WARNING(f'Default {label} already exists: {program.title}'))
