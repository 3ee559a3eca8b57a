from transitions import MachineError
from transitions.extensions.asyncio import AsyncMachine

from tenderhub.core.errors import InvalidTransition
from tenderhub.core.logging_config import logger
from tenderhub.models.enums import TenderStatus


class LifecycleMachine:
    """Forward-only status graph for a single record.

    Subclasses declare ``states``, the ``edges`` between them and which
    trigger leads to each target status. ``advance`` moves the record to a
    requested status or raises ``InvalidTransition``.
    """

    kind = "record"
    states: list = []
    edges: list = []
    triggers_by_target: dict = {}

    def __init__(self, record_id, current: str):
        self.record_id = record_id
        self.machine = AsyncMachine(
            model=self,
            states=self.states,
            transitions=self.edges,
            initial=current,
            auto_transitions=False,
            send_event=True,
            after_state_change="log_state_change",
        )

    async def log_state_change(self, event):
        logger.info(
            f"{self.kind.capitalize()} {self.record_id} moved "
            f"from {event.transition.source} to {event.transition.dest}"
        )

    async def advance(self, target: str) -> str:
        if target == self.state:
            return self.state
        trigger = self.triggers_by_target.get(target)
        if trigger is None:
            raise InvalidTransition(f"Cannot change {self.kind} status from {self.state} to {target}")
        try:
            await getattr(self, trigger)()
        except MachineError:
            logger.warning(f"Rejected {self.kind} {self.record_id} transition {self.state} -> {target}")
            raise InvalidTransition(f"Cannot change {self.kind} status from {self.state} to {target}")
        return self.state


class TenderStateMachine(LifecycleMachine):
    kind = "tender"
    states = [status.value for status in TenderStatus]
    edges = [
        {"trigger": "publish", "source": TenderStatus.DRAFT.value, "dest": TenderStatus.OPEN.value},
        {"trigger": "close", "source": TenderStatus.OPEN.value, "dest": TenderStatus.CLOSED.value},
        {
            "trigger": "award",
            "source": [TenderStatus.OPEN.value, TenderStatus.CLOSED.value],
            "dest": TenderStatus.AWARDED.value,
        },
    ]
    triggers_by_target = {
        TenderStatus.OPEN.value: "publish",
        TenderStatus.CLOSED.value: "close",
        TenderStatus.AWARDED.value: "award",
    }
