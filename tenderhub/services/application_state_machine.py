from tenderhub.models.enums import ApplicationStatus
from tenderhub.services.tender_state_machine import LifecycleMachine

_REVIEWABLE = [
    ApplicationStatus.SUBMITTED.value,
    ApplicationStatus.UNDER_REVIEW.value,
    ApplicationStatus.SHORTLISTED.value,
]


class ApplicationStateMachine(LifecycleMachine):
    kind = "application"
    states = [status.value for status in ApplicationStatus]
    edges = [
        {
            "trigger": "start_review",
            "source": ApplicationStatus.SUBMITTED.value,
            "dest": ApplicationStatus.UNDER_REVIEW.value,
        },
        {
            "trigger": "shortlist",
            "source": ApplicationStatus.UNDER_REVIEW.value,
            "dest": ApplicationStatus.SHORTLISTED.value,
        },
        {"trigger": "accept", "source": _REVIEWABLE, "dest": ApplicationStatus.ACCEPTED.value},
        {"trigger": "reject", "source": _REVIEWABLE, "dest": ApplicationStatus.REJECTED.value},
    ]
    triggers_by_target = {
        ApplicationStatus.UNDER_REVIEW.value: "start_review",
        ApplicationStatus.SHORTLISTED.value: "shortlist",
        ApplicationStatus.ACCEPTED.value: "accept",
        ApplicationStatus.REJECTED.value: "reject",
    }
