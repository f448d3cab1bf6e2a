import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.http import require_GET
from django.views.generic import View

from core.decorators import jwt_required, staff_required
from core.filtering import ALL
from core.message_utils import (
    error_response, form_validation_error, not_found_error, operation_failed,
    success_response,
)
from core.notification_utils import send_application_confirmation_email
from core.request_utils import parse_request_data
from programs.families import FAMILIES, get_family
from .exporters import export_filename, write_csv
from .services import filter_applications, get_program_application, summarize, transition_application
from .workflow import ApplicationNotFound, ApplicationWorkflowError, allowed_next_statuses

logger = logging.getLogger(__name__)


def _get_program(family, program_id):
    return family.program_model.objects.filter(external_id=program_id).first()


def _serialize_application(family, application):
    data = family.application_serializer(application).data
    status = application.status or family.initial_status
    data['status'] = status
    data['applicant_name'] = family.applicant_name(application)
    data['allowed_statuses'] = allowed_next_statuses(status, family.statuses)
    return data


def _filters_from_request(request):
    return {
        'search': request.GET.get('search', '').strip(),
        'status': request.GET.get('status', ALL),
        'category': request.GET.get('category', ALL),
    }


class ProgramApplicationsMixin:
    """Resolves the family and program from the URL before dispatching"""

    def dispatch(self, request, family_slug, program_id, *args, **kwargs):
        self.family = get_family(family_slug)
        self.program = _get_program(self.family, program_id)
        if self.program is None:
            return not_found_error(self.family.program_label)
        return super().dispatch(request, *args, **kwargs)


@method_decorator(staff_required, name='dispatch')
class ApplicationListView(ProgramApplicationsMixin, View):
    """Applications of one program, filtered, with summary tiles over the whole set"""

    def get(self, request):
        family = self.family
        applications = list(family.applications_for(self.program))
        filters = _filters_from_request(request)
        filtered = filter_applications(family, applications, **filters)

        return JsonResponse({
            'success': True,
            'program': {
                'external_id': str(self.program.external_id),
                'title': self.program.title,
            },
            'applications': [_serialize_application(family, application) for application in filtered],
            'stats': summarize(family, applications),
            'filters': filters,
            'status_choices': family.status_choices(),
            'category_choices': family.category_choices,
        })


@method_decorator(staff_required, name='dispatch')
class ApplicationDetailView(ProgramApplicationsMixin, View):
    def get(self, request, application_id):
        try:
            application = get_program_application(self.family, self.program, application_id)
        except ApplicationNotFound:
            return not_found_error('Application')
        return JsonResponse({'success': True, 'application': _serialize_application(self.family, application)})


@method_decorator(staff_required, name='dispatch')
class ApplicationStatusView(ProgramApplicationsMixin, View):
    """Operator status change; the applicant is emailed on a best-effort basis"""

    def post(self, request, application_id):
        family = self.family
        try:
            data = parse_request_data(request)
        except ValueError as e:
            return error_response(str(e))

        new_status = data.get('status')
        if not new_status:
            return error_response('Status is required')

        try:
            result = transition_application(family, self.program, application_id, new_status, reviewer=request.user)
        except ApplicationNotFound:
            return not_found_error('Application')
        except ApplicationWorkflowError as e:
            return error_response(str(e))
        except DatabaseError as e:
            logger.error(f"Failed to update application {application_id}: {str(e)}", exc_info=True)
            return operation_failed('update application status')

        status_label = dict(family.status_choices()).get(result.new_status, result.new_status)
        return success_response(
            f'Application status updated to {status_label}',
            application=_serialize_application(family, result.application),
            old_status=result.old_status,
            new_status=result.new_status,
            notified=result.notified,
            refresh=True,
        )


@method_decorator(staff_required, name='dispatch')
class ApplicationCSVExportView(ProgramApplicationsMixin, View):
    """Export the currently filtered applications of one program to CSV"""

    def get(self, request):
        family = self.family
        applications = filter_applications(
            family, family.applications_for(self.program), **_filters_from_request(request)
        )

        response = HttpResponse(content_type='text/csv')
        response['Content-Disposition'] = f'attachment; filename="{export_filename(self.program.title)}"'
        write_csv(family, applications, response)
        logger.info(f"Exported {len(applications)} {family.label.lower()}s for {self.program.external_id}")
        return response


@method_decorator(jwt_required, name='dispatch')
class ApplyView(ProgramApplicationsMixin, View):
    """Submit a registration/application to a program that is open for applications"""

    def post(self, request):
        family = self.family
        program = self.program

        if not program.is_publicly_visible:
            return not_found_error(family.program_label)
        if not program.is_accepting_applications():
            return error_response(f'Applications are closed for "{program.title}"')
        if family.applications_for(program).filter(user=request.user).exists():
            return error_response(f'You have already applied to "{program.title}"', status=409)

        try:
            data = parse_request_data(request)
        except ValueError as e:
            return error_response(str(e))

        form = family.application_form(data)
        if not form.is_valid():
            return form_validation_error(form)

        try:
            with transaction.atomic():
                application = form.save(commit=False)
                application.user = request.user
                application.status = family.initial_status
                setattr(application, family.program_fk, program)
                application.save()
        except IntegrityError:
            return error_response(f'You have already applied to "{program.title}"', status=409)
        except DatabaseError as e:
            logger.error(f"Failed to save {family.label.lower()} for {program.external_id}: {str(e)}", exc_info=True)
            return operation_failed(f'submit {family.label.lower()}')

        logger.info(f"New {family.label.lower()} {application.external_id} for {program.external_id}")

        try:
            send_application_confirmation_email(family, program, application)
        except Exception as e:
            logger.error(f"Confirmation email for {application.external_id} failed: {str(e)}", exc_info=True)

        return success_response(
            f'Your {family.label.lower()} for "{program.title}" has been submitted.',
            status=201,
            application=_serialize_application(family, application),
        )


@require_GET
@jwt_required
def my_applications(request):
    """The signed-in user's applications across every program family"""
    history = {}
    for slug, family in FAMILIES.items():
        applications = family.application_model.objects.filter(user=request.user).select_related(family.program_fk)
        history[slug] = [_serialize_application(family, application) for application in applications]
    return JsonResponse({'success': True, 'applications': history})
