from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class PartyAction(Enum):
    HOME = auto()  # Back to the main menu, allowed everywhere
    START_TRIVIA = auto()  # Draw a random trivia item
    CHOOSE_PERSON = auto()  # Open the "Who are you?" screen
    SELECT_PERSON = auto()  # payload: Person
    CHOOSE_ANSWER = auto()  # payload: choice index
    SUBMIT_ANSWER = auto()  # Grades the entry buffer
    REROLL = auto()  # Skip the current trivia item


@dataclass(frozen=True)
class ViewAction:
    """A labeled button. Activating it asks the FSM to apply `action`."""

    label: str
    action: PartyAction
    payload: Any = None


@dataclass
class View:
    """
    Data Transfer Object (DTO) describing WHAT to render.
    The renderer decides HOW to render it (Streamlit, console, tests).
    """

    type: str  # e.g. 'HOME', 'TRIVIA_CHOICE', 'DRINK', 'TEXT'
    title: str | None = None
    lines: list[str] = field(default_factory=list)
    actions: list[ViewAction] = field(default_factory=list)
    entry_prompt: str | None = None  # None -> no text input
    entry_value: str = ""
    image_path: str | None = None

    @property
    def has_entry(self) -> bool:
        return self.entry_prompt is not None
