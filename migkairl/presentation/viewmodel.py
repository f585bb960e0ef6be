from typing import Any

from migkairl.content.bank import ContentBank
from migkairl.core import PartyAction, View
from migkairl.domain.models import Home, State
from migkairl.fsm import GameStateMachine, UpdateEntry
from migkairl.presentation.dispatcher import describe
from migkairl.presentation.state_provider import IStateProvider
from migkairl.shared.telemetry import Telemetry, timed_action

STATE_KEY = "fsm_state"
ENTRY_KEY = "entry"


class PartyViewModel:
    def __init__(self, bank: ContentBank, state_provider: IStateProvider) -> None:
        self.state = state_provider
        self.telemetry = Telemetry("ViewModel")

        # Restore the session's screen, if any
        self.fsm = GameStateMachine(
            bank,
            initial_state=self.state.get(STATE_KEY, Home()),
            entry=self.state.get(ENTRY_KEY, ""),
        )

    # --- Properties ---
    @property
    def current_state(self) -> State:
        return self.fsm.current_state

    @property
    def entry(self) -> str:
        return self.fsm.entry

    def get_view(self) -> View:
        return describe(self.fsm.current_state, self.fsm.entry)

    # --- Actions (Traced) ---

    @timed_action
    def handle_action(self, action: PartyAction, payload: Any = None) -> None:
        Telemetry.new_round()
        self.telemetry.event(f"🎮 {action.name}", payload=str(payload))
        self.fsm.perform(action, payload)
        self._persist()

    def update_entry(self, text: str) -> None:
        if text == self.fsm.entry:
            return
        self.fsm.update(UpdateEntry(text))
        self.state.set(ENTRY_KEY, text)

    def _persist(self) -> None:
        self.state.set(STATE_KEY, self.fsm.current_state)
