from django.http import JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_GET

from applications.services import summarize
from core.decorators import staff_required
from programs.families import FAMILIES


@require_GET
def home(request):
    """Public landing payload: what is open right now and where to find it"""
    families = {}
    for slug, family in FAMILIES.items():
        programs = family.program_model.objects.filter(published=True, status='published')
        families[slug] = {
            'label': family.program_label,
            'published': programs.count(),
            'accepting_applications': sum(1 for program in programs if program.is_accepting_applications()),
            'url': reverse('programs:public_list', args=[slug]),
        }
    return JsonResponse({'success': True, 'name': 'Inc Combinator', 'programs': families})


@require_GET
@staff_required
def admin_overview(request):
    """Back office dashboard: totals per family and the latest applications"""
    overview = {}
    recent = []
    for slug, family in FAMILIES.items():
        applications = family.application_model.objects.only('status')
        overview[slug] = {
            'label': family.program_label,
            'programs': family.program_model.objects.count(),
            'published_programs': family.program_model.objects.filter(published=True, status='published').count(),
            'applications': summarize(family, applications),
        }

        latest = family.application_model.objects.select_related(family.program_fk).order_by('-created_at')[:5]
        for application in latest:
            program = family.program_of(application)
            recent.append({
                'family': slug,
                'external_id': str(application.external_id),
                'applicant_name': family.applicant_name(application),
                'program': program.title,
                'program_id': str(program.external_id),
                'status': application.status or family.initial_status,
                'created_at': application.created_at,
            })

    recent.sort(key=lambda item: item['created_at'], reverse=True)
    return JsonResponse({'success': True, 'overview': overview, 'recent_applications': recent[:5]})
