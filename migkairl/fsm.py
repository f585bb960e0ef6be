import logging
from dataclasses import dataclass
from typing import Any, Union

from migkairl.content.bank import ContentBank
from migkairl.content.personal import PERSONAL_PROMPTS
from migkairl.core import PartyAction
from migkairl.domain.models import (
    ChoosePerson,
    Home,
    MultipleChoice,
    Person,
    ShortAnswer,
    State,
    Trivia,
    Unique,
)

logger = logging.getLogger(__name__)

_PERSON_VALUES = frozenset(p.value for p in Person)


# --- Inbound messages (the only two mutation paths) ---
@dataclass(frozen=True)
class RequestState:
    state: State


@dataclass(frozen=True)
class UpdateEntry:
    text: str


Msg = Union[RequestState, UpdateEntry]


def _has_validator(person: Person) -> bool:
    prompt = PERSONAL_PROMPTS.get(person)
    return prompt is not None and prompt.validator is not None


def transition(
    state: State,
    action: PartyAction,
    payload: Any,
    entry: str,
    bank: ContentBank,
) -> State:
    """
    The Transition Table.
    Total: unknown (state, action) pairs are logged and leave the state as is.
    """
    match (state, action):
        # Escape hatch from every screen
        case (_, PartyAction.HOME):
            return Home()

        # HOME -> TRIVIA or CHOOSE_PERSON
        case (Home(), PartyAction.START_TRIVIA):
            return Trivia(item=bank.random_trivia())
        case (Home(), PartyAction.CHOOSE_PERSON):
            return ChoosePerson()

        # CHOOSE_PERSON -> UNIQUE
        case (ChoosePerson(), PartyAction.SELECT_PERSON) if payload in _PERSON_VALUES:
            return Unique(person=Person(payload))

        # TRIVIA -> outcome chosen by the content
        case (Trivia(item=MultipleChoice() as item), PartyAction.CHOOSE_ANSWER) if (
            isinstance(payload, int) and 0 <= payload < len(item.choices)
        ):
            return item.evaluate(payload)
        case (Trivia(item=ShortAnswer() as item), PartyAction.SUBMIT_ANSWER):
            return item.evaluate(entry)
        case (Trivia(), PartyAction.REROLL):
            return Trivia(item=bank.random_trivia())

        # UNIQUE screens with a graded answer (Miguel's circuit)
        case (Unique(person=person), PartyAction.SUBMIT_ANSWER) if _has_validator(
            person
        ):
            return PERSONAL_PROMPTS[person].validator.evaluate(entry)

        case _:
            logger.error(
                f"⛔ INVALID TRANSITION: {state.kind} + {action.name} (payload={payload!r})"
            )
            return state


class GameStateMachine:
    """
    Owns the current State and the entry buffer.
    Adheres to SRP: it only cares about transitions, not UI.
    """

    def __init__(
        self,
        bank: ContentBank,
        initial_state: State | None = None,
        entry: str = "",
    ) -> None:
        self.bank = bank
        self._state: State = initial_state if initial_state is not None else Home()
        self._entry = entry

    @property
    def current_state(self) -> State:
        return self._state

    @property
    def entry(self) -> str:
        return self._entry

    def update(self, msg: Msg) -> None:
        match msg:
            case RequestState(state=state):
                self._state = state
            case UpdateEntry(text=text):
                self._entry = text

    def perform(self, action: PartyAction, payload: Any = None) -> State:
        previous = self._state
        next_state = transition(previous, action, payload, self._entry, self.bank)
        if next_state is not previous:
            self.update(RequestState(next_state))
            logger.info(
                f"🔄 FSM: {previous.kind} --[{action.name}]--> {next_state.kind}"
            )
        return self._state
