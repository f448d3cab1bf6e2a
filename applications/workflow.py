"""
Application status state machine.

Statuses are plain strings stored on the application row. The initial value
differs per family (``pending`` for hackathon registrations, ``submitted`` for
incubation applications); everything after submission is shared.
"""

PENDING = 'pending'
SUBMITTED = 'submitted'
UNDER_REVIEW = 'under_review'
APPROVED = 'approved'
REJECTED = 'rejected'
WAITLISTED = 'waitlisted'

_INITIAL_STATES = frozenset({PENDING, SUBMITTED})
_REVIEW_STATES = frozenset({UNDER_REVIEW, APPROVED, REJECTED, WAITLISTED})

# Re-applying the current status is always allowed and is not listed here.
# Intermediate states may move anywhere, back to the initial status included;
# a decision (approved/rejected) is only revised within review.
TRANSITIONS = {
    PENDING: _REVIEW_STATES,
    SUBMITTED: _REVIEW_STATES,
    UNDER_REVIEW: (_REVIEW_STATES | _INITIAL_STATES) - {UNDER_REVIEW},
    WAITLISTED: (_REVIEW_STATES | _INITIAL_STATES) - {WAITLISTED},
    APPROVED: _REVIEW_STATES - {APPROVED},
    REJECTED: _REVIEW_STATES - {REJECTED},
}


class ApplicationWorkflowError(Exception):
    """Base class for review workflow failures"""


class ApplicationNotFound(ApplicationWorkflowError):
    def __init__(self, application_id):
        self.application_id = application_id
        super().__init__(f'Application {application_id} not found')


class InvalidStatus(ApplicationWorkflowError):
    def __init__(self, status, allowed):
        self.status = status
        self.allowed = tuple(allowed)
        super().__init__(f"'{status}' is not a valid status. Choose one of: {', '.join(self.allowed)}")


class InvalidStatusTransition(ApplicationWorkflowError):
    def __init__(self, old_status, new_status):
        self.old_status = old_status
        self.new_status = new_status
        super().__init__(f'Cannot change status from {old_status} to {new_status}')


def allowed_next_statuses(current, statuses):
    """Statuses reachable from ``current`` within one family's status set"""
    reachable = TRANSITIONS.get(current, frozenset())
    return [status for status in statuses if status == current or status in reachable]


def can_transition(old_status, new_status, statuses):
    if new_status not in statuses:
        return False
    return new_status in allowed_next_statuses(old_status, statuses)


def check_transition(old_status, new_status, statuses):
    if new_status not in statuses:
        raise InvalidStatus(new_status, statuses)
    if not can_transition(old_status, new_status, statuses):
        raise InvalidStatusTransition(old_status, new_status)
