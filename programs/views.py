import logging

from django.db import DatabaseError, transaction
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.http import require_GET
from django.views.generic import View

from core.decorators import staff_required
from core.filtering import ALL, apply_filters, boolean_match, exact_match, text_search
from core.message_utils import (
    create_success, delete_success, error_response, form_validation_error, not_found_error,
    operation_failed, update_success,
)
from core.models import create_audit_log
from core.request_utils import is_truthy, parse_request_data
from .families import get_family

logger = logging.getLogger(__name__)


def _find_program(family, external_id, queryset=None):
    queryset = family.program_queryset() if queryset is None else queryset
    return queryset.filter(external_id=external_id).first()


def _program_stats(programs):
    return {
        'total': len(programs),
        'published': sum(1 for program in programs if program.is_publicly_visible),
        'draft': sum(1 for program in programs if program.status == 'draft'),
        'cancelled': sum(1 for program in programs if program.status == 'cancelled'),
        'applications': sum(getattr(program, 'application_count', 0) for program in programs),
    }


def _serialize_program(family, program):
    data = family.program_serializer(program).data
    data['is_featured'] = family.is_featured(program)
    data['status_display'] = program.get_status_display()
    return data


@method_decorator(staff_required, name='dispatch')
class ProgramListView(View):
    """Management list: featured first, then newest, with search/status/published filters"""

    def get(self, request, family_slug):
        family = get_family(family_slug)
        programs = family.sort_programs(family.program_queryset())

        search_query = request.GET.get('search', '').strip()
        status_filter = request.GET.get('status', ALL)
        published_filter = request.GET.get('published', ALL)

        filtered = apply_filters(programs, [
            text_search(family.program_search_fields, search_query),
            exact_match('status', status_filter),
            boolean_match('published', published_filter, 'published', 'draft'),
        ])

        return JsonResponse({
            'success': True,
            'family': family.slug,
            'programs': [_serialize_program(family, program) for program in filtered],
            'stats': _program_stats(programs),
            'filters': {
                'search': search_query,
                'status': status_filter,
                'published': published_filter,
            },
            'status_choices': family.program_model.STATUS_CHOICES,
        })


@method_decorator(staff_required, name='dispatch')
class ProgramDetailView(View):
    def get(self, request, family_slug, external_id):
        family = get_family(family_slug)
        program = _find_program(family, external_id)
        if program is None:
            return not_found_error(family.program_label)
        return JsonResponse({'success': True, 'program': _serialize_program(family, program)})


@method_decorator(staff_required, name='dispatch')
class ProgramSaveView(View):
    """
    Create a program, or update it when ``external_id`` is given.

    Every validation rule runs before the single insert or update; a failed
    rule leaves the database untouched.
    """

    def post(self, request, family_slug, external_id=None):
        family = get_family(family_slug)

        instance = None
        if external_id is not None:
            instance = _find_program(family, external_id, family.program_model.objects.all())
            if instance is None:
                return not_found_error(family.program_label)

        try:
            data = parse_request_data(request)
        except ValueError as e:
            return error_response(str(e))

        form = family.program_form(data, instance=instance)
        if not form.is_valid():
            return form_validation_error(form)

        creating = instance is None
        action = 'create' if creating else 'update'
        try:
            with transaction.atomic():
                program = form.save(commit=False)
                if creating:
                    program.created_by = request.user
                program.save()
        except DatabaseError as e:
            logger.error(f"Failed to {action} {family.program_label.lower()}: {str(e)}", exc_info=True)
            return operation_failed(f"{action} {family.program_label.lower()}")

        create_audit_log(
            entity_name=family.program_model.__name__,
            entity_id=program.external_id,
            action=action,
            changed_by=request.user,
            diff_data={'fields': form.changed_data},
        )
        logger.info(f"{family.program_label} {program.external_id} {action}d by {request.user.email}")

        program = _find_program(family, program.external_id)
        payload = {'program': _serialize_program(family, program), 'refresh': True}
        if creating:
            return create_success(family.program_label, program.title, **payload)
        return update_success(family.program_label, program.title, **payload)


@method_decorator(staff_required, name='dispatch')
class ProgramDeleteView(View):
    """Delete a program after explicit confirmation; featured programs are protected"""
    http_method_names = ['post', 'delete']

    def post(self, request, family_slug, external_id):
        family = get_family(family_slug)
        program = _find_program(family, external_id, family.program_model.objects.all())
        if program is None:
            return not_found_error(family.program_label)

        if family.is_featured(program):
            logger.warning(f"Refused to delete featured {family.program_label.lower()} {program.external_id}")
            return error_response(
                f'Cannot delete the default {family.program_label.lower()}. It is protected.', status=403
            )

        try:
            data = parse_request_data(request)
        except ValueError as e:
            return error_response(str(e))

        if not is_truthy(data.get('confirm')) and not is_truthy(request.GET.get('confirm')):
            return error_response(
                f'Please confirm that you want to delete "{program.title}". This action cannot be undone.',
                requires_confirmation=True,
            )

        title = program.title
        program_id = program.external_id
        try:
            program.delete()
        except DatabaseError as e:
            logger.error(f"Failed to delete {family.program_label.lower()} {program_id}: {str(e)}", exc_info=True)
            return operation_failed(f"delete {family.program_label.lower()}")

        create_audit_log(
            entity_name=family.program_model.__name__,
            entity_id=program_id,
            action='delete',
            changed_by=request.user,
            diff_data={'title': title},
        )
        return delete_success(family.program_label, title, refresh=True)

    delete = post


def _public_programs(family):
    return family.program_queryset().filter(published=True, status='published')


@require_GET
def public_program_list(request, family_slug):
    """Programs shown on the public site"""
    family = get_family(family_slug)
    programs = family.sort_programs(_public_programs(family))
    return JsonResponse({
        'success': True,
        'programs': [_serialize_program(family, program) for program in programs],
    })


@require_GET
def public_program_detail(request, family_slug, external_id):
    family = get_family(family_slug)
    program = _find_program(family, external_id, _public_programs(family))
    if program is None:
        return not_found_error(family.program_label)
    return JsonResponse({'success': True, 'program': _serialize_program(family, program)})
