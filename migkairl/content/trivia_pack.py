from migkairl.domain.models import (
    Drink,
    Generic,
    GiveDrinks,
    Person,
    TriviaItem,
    multiple_choice,
    short_answer,
)
from migkairl.domain.screens import StaticScreen
from migkairl.domain.validators import ExactAnswer, KeywordAnswer

# One instance, shared by every choice of the "alone" question
KAI_ALONE = Generic(
    screen=StaticScreen(
        lines=("Give Kai 5 drinks to help dull his need for companionship.",)
    )
)


def build_trivia() -> list[TriviaItem]:
    """
    The reference trivia set. Outcomes are kept exactly as authored,
    including the bare counts that go through Drink.from_count().
    """
    return [
        multiple_choice(
            'Which Evan is "Black Evan"?',
            [("Evan Holmes", 4), ("Evan Hoerl", 1)],
        ),
        multiple_choice(
            "What was Waffles' very first transformation?",
            [
                ("Giant Toad", 3),
                ("Snake", 4),
                ("Bear", 1),
                ("Swarm of Fleas", 4),
                ("Veloceraptor", 5),
            ],
        ),
        multiple_choice(
            'Who came up with the name "Savisaac Migkairl"?',
            [
                (Person.CARL, 3),
                (Person.ISAAC, 3),
                (Person.KAI, 1),
                (Person.MIGUEL, 3),
                (Person.SAVANNAH, 3),
            ],
        ),
        short_answer(
            "Savannah has a mountain tattoo which is very similar to that of who?",
            ExactAnswer(
                answer="grace",
                correct=Drink.from_count(1),
                wrong=Drink.from_count(3),
            ),
        ),
        short_answer(
            'What is the significance of the phrase "Santa Clara Java Virtual Machine"?',
            KeywordAnswer(
                keywords=("name", "last"),
                correct=GiveDrinks(count=4),
                wrong=Drink.from_count(2),
            ),
        ),
        short_answer(
            "Who did Jesus fail to woo?",
            KeywordAnswer(
                keywords=("frulam", "mondath"),
                correct=GiveDrinks(count=3),
                wrong=Drink.from_count(3),
            ),
        ),
        short_answer(
            "Which stupid senior design project beat Isaac, Miguel, Carl, and Evan?",
            KeywordAnswer(
                keywords=("human", "keyboard"),
                correct=GiveDrinks(count=3),
                wrong=Drink.from_count(3),
            ),
        ),
        multiple_choice(
            "Who is completely and uterly alone?",
            [("Kai", KAI_ALONE)] * 6,
        ),
    ]
