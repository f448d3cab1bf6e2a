import logging
from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from .models import EmailLog

logger = logging.getLogger(__name__)

STATUS_OUTCOME_TEXT = {
    'approved': (
        "Congratulations! Your application has been approved.\n"
        "We'll send you event details and the schedule within 24 hours."
    ),
    'rejected': (
        "Thank you for your interest. Unfortunately, we couldn't select your application this time.\n"
        "You are welcome to apply for our future programs and events."
    ),
    'waitlisted': (
        "Your application has been placed on the waitlist.\n"
        "We'll reach out as soon as a spot becomes available."
    ),
}

UNDER_REVIEW_TEXT = (
    "Your application is currently being reviewed.\n"
    "We'll update you once a decision has been made."
)


def _status_label(status):
    return (status or '').replace('_', ' ').title()


def _deliver(recipient, email_type, subject, body):
    """
    Send one plain-text email and record the attempt in the email log.

    Returns True when the message was handed to the mail backend. Failures are
    logged and reported through the return value only.
    """
    log_entry = EmailLog(recipient=recipient, type=email_type, subject=subject)
    try:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
            fail_silently=False,
        )
        log_entry.status = 'sent'
        log_entry.sent_at = timezone.now()
        logger.info(f"Sent {email_type} email to {recipient}")
        return True
    except Exception as e:
        log_entry.status = 'failed'
        log_entry.error_message = str(e)
        logger.error(f"Failed to send {email_type} email to {recipient}: {str(e)}")
        return False
    finally:
        try:
            log_entry.save()
        except Exception as e:
            logger.error(f"Failed to record email log for {recipient}: {str(e)}")


def send_status_update_email(family, program, application, old_status, new_status):
    """
    Tell an applicant that an operator moved their application from
    ``old_status`` to ``new_status``.

    Parameters
    ----------
    family : ProgramFamily
        Supplies the notification type, wording and applicant name lookup.
    program : Hackathon | IncubationProgram
    application : HackathonApplication | IncubationApplication
    """
    if not application.email:
        logger.warning(f"Application {application.external_id} has no email address; status email skipped")
        return False

    applicant_name = family.applicant_name(application) or 'there'
    subject = f"{family.label} Status Update - {program.title}"
    outcome = STATUS_OUTCOME_TEXT.get(new_status, UNDER_REVIEW_TEXT)
    program_url = f"{getattr(settings, 'FRONTEND_URL', '')}/{family.public_path}/{program.external_id}"

    body = f"""Hi {applicant_name}!

We have an update regarding your {family.label.lower()} for {program.title}.

Previous status: {_status_label(old_status)}
New status: {_status_label(new_status)}

{outcome}

View program details: {program_url}

Best regards,
Inc Combinator Team

If you have any questions, please contact us at {settings.SUPPORT_EMAIL}
"""
    return _deliver(application.email, family.status_email_type, subject, body)


def send_application_confirmation_email(family, program, application):
    """Acknowledge a newly submitted application"""
    if not application.email:
        return False

    applicant_name = family.applicant_name(application) or 'there'
    subject = f"{family.label} Received - {program.title}"
    body = f"""Hi {applicant_name}!

Thank you for submitting your {family.label.lower()} for {program.title}.
Your application status is: {_status_label(application.status)}.

Our team will review your submission and get back to you soon.

Best regards,
Inc Combinator Team
"""
    return _deliver(application.email, family.confirmation_email_type, subject, body)
