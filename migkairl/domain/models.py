from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from migkairl.domain.ports import AnswerValidator, Screen


# --- Enums ---
class Person(str, Enum):
    SAVANNAH = "Savannah"
    ISAAC = "Isaac"
    MIGUEL = "Miguel"
    KAI = "Kai"
    CARL = "Carl"
    GUEST = "Guest"

    def __str__(self) -> str:
        return self.value


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# --- States ---
class Home(_Frozen):
    kind: Literal["home"] = "home"


class Trivia(_Frozen):
    kind: Literal["trivia"] = "trivia"
    item: "TriviaItem"


class ChoosePerson(_Frozen):
    kind: Literal["choose_person"] = "choose_person"


class Unique(_Frozen):
    kind: Literal["unique"] = "unique"
    person: Person


class Drink(_Frozen):
    kind: Literal["drink"] = "drink"
    correct: bool
    count: int = Field(ge=0)

    @classmethod
    def from_count(cls, count: int) -> "Drink":
        """0 or 1 drinks is the reward path, anything more is a penalty."""
        return cls(correct=count <= 1, count=count)


class GiveDrinks(_Frozen):
    kind: Literal["give_drinks"] = "give_drinks"
    count: int = Field(ge=0)


class Generic(_Frozen):
    kind: Literal["generic"] = "generic"
    screen: Screen


State = Annotated[
    Union[Home, Trivia, ChoosePerson, Unique, Drink, GiveDrinks, Generic],
    Field(discriminator="kind"),
]


def as_state(value: Any) -> State:
    """Wraps a bare drink count into a Drink state; States pass through."""
    if isinstance(value, int) and not isinstance(value, bool):
        return Drink.from_count(value)
    return value


# --- Trivia ---
class Choice(_Frozen):
    label: str
    outcome: State


class MultipleChoice(_Frozen):
    kind: Literal["multiple_choice"] = "multiple_choice"
    question: str
    choices: tuple[Choice, ...]

    def evaluate(self, index: int) -> State:
        return self.choices[index].outcome


class ShortAnswer(_Frozen):
    kind: Literal["short_answer"] = "short_answer"
    question: str
    validator: AnswerValidator

    def evaluate(self, text: str) -> State:
        # Raw text; trimming and casing are the validator's business
        return self.validator.evaluate(text)


TriviaItem = Annotated[
    Union[MultipleChoice, ShortAnswer], Field(discriminator="kind")
]

# State <-> TriviaItem is recursive; resolve the forward references now
Trivia.model_rebuild()
Choice.model_rebuild()
MultipleChoice.model_rebuild()


def multiple_choice(question: str, choices: Iterable[tuple[Any, Any]]) -> MultipleChoice:
    """Labels go through str(), outcomes through as_state()."""
    return MultipleChoice(
        question=question,
        choices=tuple(
            Choice(label=str(label), outcome=as_state(outcome))
            for label, outcome in choices
        ),
    )


def short_answer(question: str, validator: AnswerValidator) -> ShortAnswer:
    return ShortAnswer(question=question, validator=validator)
