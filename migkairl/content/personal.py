from dataclasses import dataclass

from migkairl.config import GameConfig
from migkairl.domain.models import Drink, GiveDrinks, Person
from migkairl.domain.ports import AnswerValidator
from migkairl.domain.validators import NumericAnswer


@dataclass(frozen=True)
class PersonalPrompt:
    """What a player sees after picking themselves on the Unique screen."""

    lines: tuple[str, ...]
    validator: AnswerValidator | None = None  # Adds a text field + Submit
    image_path: str | None = None


MIGUEL_CIRCUIT = NumericAnswer(
    expected=GameConfig.MIGUEL_EXPECTED_ANSWER,
    correct=GiveDrinks(count=GameConfig.MIGUEL_GIVE_DRINKS),
    wrong=Drink(correct=False, count=GameConfig.MIGUEL_WRONG_DRINKS),
)

PERSONAL_PROMPTS: dict[Person, PersonalPrompt] = {
    Person.CARL: PersonalPrompt(
        lines=(
            "Escuzi! Bopity boopy!",
            "Take 3 drinks while doing an Italian gesture with your free hand.",
        )
    ),
    Person.ISAAC: PersonalPrompt(
        lines=(
            "Do some pushups, then take a number of drinks equal to forty minus "
            "how many pushups you did. If you do more than forty, you may give "
            "out drinks.",
        )
    ),
    Person.KAI: PersonalPrompt(
        lines=(
            "Have a conversation with Miguel in Spanish. Miguel may decide how "
            "many drinks you take based on how good your pronunciation, grammar, "
            "and comprehension are.",
        )
    ),
    Person.MIGUEL: PersonalPrompt(
        lines=(
            "In the circuit shown below R2 = 2 kΩ.",
            "Assume that the op-amp is ideal.",
            "Determine the value of R1 so that the closed-loop gain, G = vO / vS = 3.",
        ),
        validator=MIGUEL_CIRCUIT,
        image_path=GameConfig.OP_AMP_IMAGE_PATH,
    ),
    Person.SAVANNAH: PersonalPrompt(
        lines=(
            "Come up with familial relations that relate all of the other "
            "players, i.e. Miguel is Carl's dad. For the rest of the game, other "
            "players must speak to eachother as if they are actually related in "
            "the way you define. Anyone who does not adhear must drink.",
        )
    ),
    Person.GUEST: PersonalPrompt(
        lines=(
            "The five founders of Savisaac Migkairl stand and look down on you "
            "while you take 5 drinks.",
        )
    ),
}

# Display order on the "Who are you?" screen
PERSON_ORDER: tuple[Person, ...] = (
    Person.CARL,
    Person.ISAAC,
    Person.KAI,
    Person.MIGUEL,
    Person.SAVANNAH,
    Person.GUEST,
)
