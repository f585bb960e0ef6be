from dataclasses import dataclass

from migkairl.config import GameConfig
from migkairl.core import PartyAction, View, ViewAction
from migkairl.domain.ports import Screen


@dataclass(frozen=True)
class StaticScreen(Screen):
    """
    Fixed text with a single way out (Home).
    Used by content that overrides the normal outcome screens.
    """

    lines: tuple[str, ...]
    title: str | None = None

    def render(self) -> View:
        return View(
            type="TEXT",
            title=self.title,
            lines=list(self.lines),
            actions=[ViewAction(GameConfig.HOME_LABEL, PartyAction.HOME)],
        )
