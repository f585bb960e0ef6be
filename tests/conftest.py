import random

import pytest
import streamlit as st

from migkairl.content.bank import ContentBank
from migkairl.content.trivia_pack import build_trivia
from migkairl.domain.models import Drink, GiveDrinks, multiple_choice, short_answer
from migkairl.domain.validators import KeywordAnswer


class MockSessionState(dict):
    """
    Mock for st.session_state that behaves like both a dict and an object.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err


@pytest.fixture(autouse=True)
def mock_streamlit_session():
    """
    Ensures st.session_state exists (and is isolated) for every test.
    """
    original_session_state = getattr(st, "session_state", None)
    st.session_state = MockSessionState()

    yield st.session_state

    st.session_state.clear()
    if original_session_state is not None:
        st.session_state = original_session_state


@pytest.fixture
def seeded_bank():
    """The real trivia set with a deterministic draw."""
    return ContentBank(build_trivia(), rng=random.Random(1234))


@pytest.fixture
def choice_item():
    return multiple_choice(
        "Pick one",
        [("Water", 4), ("Beer", 1), ("Both", GiveDrinks(count=2))],
    )


@pytest.fixture
def text_item():
    return short_answer(
        "Say the magic word",
        KeywordAnswer(
            keywords=("please",),
            correct=GiveDrinks(count=2),
            wrong=Drink.from_count(3),
        ),
    )


@pytest.fixture
def single_item_bank(choice_item):
    return ContentBank([choice_item], rng=random.Random(0))
