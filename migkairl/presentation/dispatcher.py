from migkairl.config import GameConfig
from migkairl.content.personal import PERSON_ORDER, PERSONAL_PROMPTS
from migkairl.core import PartyAction, View, ViewAction
from migkairl.domain.models import (
    ChoosePerson,
    Drink,
    Generic,
    GiveDrinks,
    Home,
    MultipleChoice,
    ShortAnswer,
    State,
    Trivia,
    TriviaItem,
    Unique,
)

HOME_ACTION = ViewAction(GameConfig.HOME_LABEL, PartyAction.HOME)
REROLL_ACTION = ViewAction(GameConfig.REROLL_LABEL, PartyAction.REROLL)
SUBMIT_ACTION = ViewAction(GameConfig.SUBMIT_LABEL, PartyAction.SUBMIT_ANSWER)


def _drinks(count: int) -> str:
    return f"{count} drink{'' if count == 1 else 's'}"


def describe(state: State, entry: str = "") -> View:
    """
    Pure mapping from the current State (+ entry buffer) to a View.
    Never mutates anything; every action is a request for a transition.
    """
    match state:
        case Generic(screen=screen):
            return screen.render()

        case Home():
            return View(
                type="HOME",
                title=GameConfig.APP_TITLE,
                actions=[
                    ViewAction(GameConfig.TRIVIA_LABEL, PartyAction.START_TRIVIA),
                    ViewAction(GameConfig.UNIQUE_LABEL, PartyAction.CHOOSE_PERSON),
                ],
            )

        case Trivia(item=item):
            return _describe_trivia(item, entry)

        case ChoosePerson():
            return View(
                type="CHOOSE_PERSON",
                lines=[GameConfig.CHOOSE_PERSON_PROMPT],
                actions=[
                    ViewAction(str(person), PartyAction.SELECT_PERSON, person)
                    for person in PERSON_ORDER
                ]
                + [HOME_ACTION],
            )

        case Unique(person=person):
            prompt = PERSONAL_PROMPTS[person]
            view = View(
                type="UNIQUE",
                lines=list(prompt.lines),
                image_path=prompt.image_path,
            )
            if prompt.validator is not None:
                view.entry_prompt = GameConfig.ENTRY_PROMPT
                view.entry_value = entry
                view.actions.append(SUBMIT_ACTION)
            view.actions.append(HOME_ACTION)
            return view

        case Drink(correct=True, count=count):
            return View(
                type="DRINK",
                lines=[f"Correct! Take only {_drinks(count)}!"],
                actions=[HOME_ACTION],
            )

        case Drink(count=count):
            return View(
                type="DRINK",
                lines=[f"Wrong! Take {_drinks(count)}!"],
                actions=[HOME_ACTION],
            )

        case GiveDrinks(count=count):
            return View(
                type="GIVE_DRINKS",
                lines=[f"Correct! Give out {_drinks(count)}!"],
                actions=[HOME_ACTION],
            )

    raise TypeError(f"Unknown state: {state!r}")


def _describe_trivia(item: TriviaItem, entry: str) -> View:
    match item:
        case MultipleChoice():
            return View(
                type="TRIVIA_CHOICE",
                lines=[item.question],
                actions=[
                    ViewAction(choice.label, PartyAction.CHOOSE_ANSWER, index)
                    for index, choice in enumerate(item.choices)
                ]
                + [REROLL_ACTION, HOME_ACTION],
            )

        case ShortAnswer():
            return View(
                type="TRIVIA_SHORT",
                lines=[item.question],
                actions=[SUBMIT_ACTION, REROLL_ACTION, HOME_ACTION],
                entry_prompt=GameConfig.ENTRY_PROMPT,
                entry_value=entry,
            )

    raise TypeError(f"Unknown trivia item: {item!r}")
