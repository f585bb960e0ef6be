import random
from unittest.mock import patch

import pytest

from migkairl.content.bank import ContentBank, EmptyContentBankError, build_content_bank
from migkairl.content.trivia_pack import KAI_ALONE, build_trivia
from migkairl.domain.models import Drink, GiveDrinks, MultipleChoice, ShortAnswer


def _find(question_fragment):
    for item in build_trivia():
        if question_fragment in item.question:
            return item
    raise AssertionError(f"No trivia item mentions {question_fragment!r}")


class TestContentBank:
    def test_empty_bank_fails_at_construction(self):
        with pytest.raises(EmptyContentBankError):
            ContentBank([])

    def test_empty_bank_error_is_a_value_error(self):
        assert issubclass(EmptyContentBankError, ValueError)

    def test_reference_set_has_eight_items(self, seeded_bank):
        assert len(seeded_bank) == 8

    def test_random_draw_covers_every_item(self, seeded_bank):
        seen = {seeded_bank.random_trivia().question for _ in range(2000)}
        assert seen == {item.question for item in seeded_bank.items}

    def test_draw_is_uniform_over_index_range(self, seeded_bank):
        with patch.object(seeded_bank._rng, "randrange", return_value=7) as mock_range:
            item = seeded_bank.random_trivia()

        mock_range.assert_called_once_with(8)
        assert item == seeded_bank.items[7]

    def test_draw_returns_a_copy_sharing_validators(self, seeded_bank):
        with patch.object(seeded_bank._rng, "randrange", return_value=3):
            item = seeded_bank.random_trivia()

        original = seeded_bank.items[3]
        assert item is not original
        assert item == original
        assert item.validator is original.validator

    def test_same_seed_same_sequence(self):
        a = ContentBank(build_trivia(), rng=random.Random(7))
        b = ContentBank(build_trivia(), rng=random.Random(7))
        assert [a.random_trivia().question for _ in range(20)] == [
            b.random_trivia().question for _ in range(20)
        ]

    def test_build_content_bank_uses_configured_seed(self, monkeypatch):
        monkeypatch.setenv("MIGKAIRL_SEED", "42")
        a = build_content_bank()
        b = build_content_bank(seed=42)
        assert [a.random_trivia().question for _ in range(10)] == [
            b.random_trivia().question for _ in range(10)
        ]


class TestReferenceTrivia:
    def test_black_evan_outcomes(self):
        item = _find("Black Evan")
        assert isinstance(item, MultipleChoice)
        assert item.evaluate(0) == Drink(correct=False, count=4)
        assert item.evaluate(1) == Drink(correct=True, count=1)

    def test_waffles_choices_in_authored_order(self):
        item = _find("Waffles")
        assert [c.label for c in item.choices] == [
            "Giant Toad",
            "Snake",
            "Bear",
            "Swarm of Fleas",
            "Veloceraptor",
        ]
        assert [c.outcome.count for c in item.choices] == [3, 4, 1, 4, 5]

    def test_name_origin_uses_person_labels(self):
        item = _find("Savisaac Migkairl")
        assert [c.label for c in item.choices] == ["Carl", "Isaac", "Kai", "Miguel", "Savannah"]
        assert item.evaluate(2) == Drink(correct=True, count=1)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Grace", Drink(correct=True, count=1)),
            (" grace ", Drink(correct=True, count=1)),
            ("Savannah", Drink(correct=False, count=3)),
        ],
    )
    def test_tattoo_question(self, text, expected):
        item = _find("mountain tattoo")
        assert isinstance(item, ShortAnswer)
        assert item.evaluate(text) == expected

    @pytest.mark.parametrize("text", ["Their NAMES", "last names", "It's the LAST bit"])
    def test_santa_clara_keywords_give_four(self, text):
        item = _find("Santa Clara Java Virtual Machine")
        assert item.evaluate(text) == GiveDrinks(count=4)

    @pytest.mark.parametrize("text", ["", "java", "a city"])
    def test_santa_clara_fallback_follows_count_rule(self, text):
        item = _find("Santa Clara Java Virtual Machine")
        # 2 drinks is over the reward threshold, so correct is False
        assert item.evaluate(text) == Drink(correct=False, count=2)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Frulam Mondath", GiveDrinks(count=3)),
            ("mondath", GiveDrinks(count=3)),
            ("Sarah", Drink(correct=False, count=3)),
        ],
    )
    def test_jesus_question(self, text, expected):
        assert _find("Jesus").evaluate(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Human keyboard", GiveDrinks(count=3)),
            ("the keyboard one", GiveDrinks(count=3)),
            ("robot arm", Drink(correct=False, count=3)),
        ],
    )
    def test_senior_design_question(self, text, expected):
        assert _find("senior design").evaluate(text) == expected

    def test_alone_question_shares_one_generic_state(self):
        item = _find("alone")
        assert len(item.choices) == 6
        assert all(c.label == "Kai" for c in item.choices)
        assert all(c.outcome is KAI_ALONE for c in item.choices)
