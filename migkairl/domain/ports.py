from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from migkairl.core import View

if TYPE_CHECKING:
    from migkairl.domain.models import State


class Screen(ABC):
    """
    Render strategy carried by a Generic state.
    Instances are immutable and may be shared by several states.
    """

    @abstractmethod
    def render(self) -> View:
        pass


class AnswerValidator(ABC):
    """
    Grades free-text answers. Must be total: any input maps to a State.
    """

    @abstractmethod
    def evaluate(self, text: str) -> "State":
        pass
