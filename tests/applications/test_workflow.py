import pytest

from applications import workflow
from applications.workflow import (
    InvalidStatus, InvalidStatusTransition, allowed_next_statuses, can_transition, check_transition,
)

HACKATHON_STATUSES = ("pending", "under_review", "approved", "rejected", "waitlisted")
INCUBATION_STATUSES = ("submitted", "under_review", "approved", "rejected", "waitlisted")


@pytest.mark.parametrize("statuses", [HACKATHON_STATUSES, INCUBATION_STATUSES])
def test_initial_status_can_move_to_any_review_state(statuses):
    initial = statuses[0]
    for target in ("under_review", "approved", "rejected", "waitlisted"):
        assert can_transition(initial, target, statuses)


@pytest.mark.parametrize("current", ["under_review", "waitlisted"])
def test_intermediate_states_can_return_to_the_initial_status(current):
    assert can_transition(current, "pending", HACKATHON_STATUSES)
    assert can_transition(current, "submitted", INCUBATION_STATUSES)


@pytest.mark.parametrize("current", ["approved", "rejected"])
def test_decisions_do_not_return_to_the_initial_status(current):
    assert not can_transition(current, "pending", HACKATHON_STATUSES)
    assert not can_transition(current, "submitted", INCUBATION_STATUSES)


def test_decisions_can_be_revised():
    assert can_transition("approved", "rejected", HACKATHON_STATUSES)
    assert can_transition("rejected", "approved", HACKATHON_STATUSES)
    assert can_transition("approved", "under_review", INCUBATION_STATUSES)


@pytest.mark.parametrize("status", HACKATHON_STATUSES)
def test_reapplying_the_current_status_is_allowed(status):
    assert can_transition(status, status, HACKATHON_STATUSES)


def test_statuses_outside_the_family_are_invalid():
    assert not can_transition("pending", "submitted", HACKATHON_STATUSES)
    with pytest.raises(InvalidStatus) as excinfo:
        check_transition("pending", "archived", HACKATHON_STATUSES)
    assert excinfo.value.allowed == HACKATHON_STATUSES


def test_illegal_move_raises_transition_error():
    with pytest.raises(InvalidStatusTransition) as excinfo:
        check_transition("approved", "pending", HACKATHON_STATUSES)
    assert str(excinfo.value) == "Cannot change status from approved to pending"


def test_allowed_next_statuses_keeps_family_order():
    assert allowed_next_statuses("approved", INCUBATION_STATUSES) == [
        "under_review", "approved", "rejected", "waitlisted",
    ]
    assert allowed_next_statuses("submitted", INCUBATION_STATUSES) == list(INCUBATION_STATUSES)


def test_every_status_has_a_row_in_the_table():
    all_statuses = set(HACKATHON_STATUSES) | set(INCUBATION_STATUSES)
    assert set(workflow.TRANSITIONS) == all_statuses
