"""
Application review operations shared by every program family.

Views call these functions with a ``ProgramFamily`` (see ``programs.families``)
so hackathon registrations and incubation applications go through exactly the
same filtering, statistics and status workflow.
"""
import logging
from dataclasses import dataclass

from django.core.exceptions import ValidationError
from django.utils import timezone

from core.filtering import apply_filters, exact_match, text_search
from core.models import create_audit_log
from core.notification_utils import send_status_update_email
from .workflow import ApplicationNotFound, check_transition

logger = logging.getLogger(__name__)


@dataclass
class TransitionResult:
    """Outcome of a status change; ``application`` is freshly read from the database"""
    application: object
    old_status: str
    new_status: str
    notified: bool = False

    @property
    def changed(self):
        return self.old_status != self.new_status


def filter_applications(family, applications, search=None, status=None, category=None):
    """Keep the applications matching the search box, status and category filters"""
    predicates = [
        text_search(family.application_search_fields, search),
        exact_match('status', status, default=family.initial_status),
        exact_match(family.category_field, category),
    ]
    return apply_filters(list(applications), predicates)


def summarize(family, applications):
    """Total plus one count per status of the family"""
    by_status = {status: 0 for status in family.statuses}
    total = 0
    for application in applications:
        status = application.status or family.initial_status
        by_status[status] = by_status.get(status, 0) + 1
        total += 1
    return {'total': total, 'by_status': by_status}


def get_program_application(family, program, application_id):
    """Look up one application inside the program's own application set"""
    try:
        return family.applications_for(program).get(external_id=application_id)
    except (family.application_model.DoesNotExist, ValidationError, ValueError):
        raise ApplicationNotFound(application_id)


def transition_application(family, program, application_id, new_status, reviewer=None, notify=None):
    """
    Move one application to ``new_status``.

    The row is updated once, then re-read. The applicant is notified through
    ``notify`` when the status actually changed; notification problems are
    logged and never undo or fail the transition.

    Raises
    ------
    ApplicationNotFound
        The id does not belong to ``program``. Nothing is written.
    InvalidStatus, InvalidStatusTransition
        The move is not allowed. Nothing is written.
    """
    notify = notify or send_status_update_email
    application = get_program_application(family, program, application_id)
    old_status = application.status or family.initial_status
    check_transition(old_status, new_status, family.statuses)

    now = timezone.now()
    changes = {'status': new_status, 'updated_at': now}
    if family.stamps_reviewed_at:
        changes['reviewed_at'] = now
        if reviewer is not None and getattr(reviewer, 'is_authenticated', False):
            changes['reviewed_by'] = reviewer

    family.application_model.objects.filter(pk=application.pk).update(**changes)
    application = family.application_model.objects.get(pk=application.pk)
    logger.info(f"{family.label} {application.external_id} moved from {old_status} to {new_status}")

    notified = False
    if old_status != new_status:
        try:
            notified = bool(notify(family, program, application, old_status, new_status))
        except Exception as e:
            logger.error(f"Status email for application {application.external_id} failed: {str(e)}", exc_info=True)
        if not notified:
            logger.warning(f"Applicant of {application.external_id} was not notified of the status change")

    create_audit_log(
        entity_name=family.application_model.__name__,
        entity_id=application.external_id,
        action='status_change',
        changed_by=reviewer,
        diff_data={
            'program': str(program.external_id),
            'old_status': old_status,
            'new_status': new_status,
            'notified': notified,
        },
    )

    return TransitionResult(application=application, old_status=old_status, new_status=new_status, notified=notified)
