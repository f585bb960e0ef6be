import random
from collections.abc import Sequence

from migkairl.config import GameConfig
from migkairl.content.trivia_pack import build_trivia
from migkairl.domain.models import TriviaItem
from migkairl.shared.telemetry import Telemetry


class EmptyContentBankError(ValueError):
    """Raised at startup when there is no trivia to draw from."""


class ContentBank:
    """
    Read-only trivia collection with a uniform random draw.
    Built once at startup and shared by reference afterwards.
    """

    def __init__(
        self, items: Sequence[TriviaItem], rng: random.Random | None = None
    ) -> None:
        if not items:
            raise EmptyContentBankError("Content bank needs at least one trivia item")
        self._items: tuple[TriviaItem, ...] = tuple(items)
        self._rng = rng if rng is not None else random.Random()
        self.telemetry = Telemetry("ContentBank")
        self.telemetry.event("Content bank ready", items=len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[TriviaItem, ...]:
        return self._items

    def random_trivia(self) -> TriviaItem:
        index = self._rng.randrange(len(self._items))
        # Shallow copy: choices and validators stay shared
        return self._items[index].model_copy()


def build_content_bank(seed: int | None = None) -> ContentBank:
    if seed is None:
        seed = GameConfig.random_seed()
    return ContentBank(build_trivia(), rng=random.Random(seed))
