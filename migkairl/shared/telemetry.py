import logging
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from functools import wraps
from typing import Any, TypeVar

from prometheus_client import CollectorRegistry, Counter, Histogram

from migkairl.core import PartyAction

# One id per button press, shared by every log line that press causes
round_id_ctx: ContextVar[str] = ContextVar("round_id", default="startup")

# Own registry: a Streamlit module reload builds a fresh one instead of
# colliding with collectors already registered on the global REGISTRY.
GAME_REGISTRY = CollectorRegistry()

ACTION_SECONDS = Histogram(
    "migkairl_action_seconds",
    "Time to apply one player action",
    ["action", "screen"],
    registry=GAME_REGISTRY,
)
SCREEN_CHANGES = Counter(
    "migkairl_screen_changes",
    "Screens reached, by the action pressed and the screen it was pressed on",
    ["action", "source", "target"],
    registry=GAME_REGISTRY,
)

R = TypeVar("R")


class Telemetry:
    """
    Logger for one game component. Every line is stamped with the round id.
    Handlers come from app.py (basicConfig / OTel), not from here.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        self.logger = logging.getLogger(f"migkairl.{component}")

    @staticmethod
    def new_round() -> str:
        round_id = uuid.uuid4().hex[:8]
        round_id_ctx.set(round_id)
        return round_id

    @staticmethod
    def current_round() -> str:
        return round_id_ctx.get()

    def event(self, message: str, **fields: Any) -> None:
        self.logger.info(f"[{self.current_round()}] {message} | {fields}")

    def failure(self, message: str, error: Exception, **fields: Any) -> None:
        self.logger.error(
            f"[{self.current_round()}] ❌ {message} | {error} | {fields}",
            exc_info=True,
        )


def timed_action(
    func: Callable[..., R],
) -> Callable[..., R]:
    """
    For `handle_action(self, action, payload=None)` on objects exposing
    `current_state` and `telemetry`. Times the action against the screen it
    was pressed on and counts the screen it led to.
    """

    @wraps(func)
    def wrapper(self: Any, action: PartyAction, *args: Any, **kwargs: Any) -> R:
        source = self.current_state.kind
        start = time.perf_counter()
        try:
            result = func(self, action, *args, **kwargs)
        except Exception as e:
            ACTION_SECONDS.labels(action=action.name, screen=source).observe(
                time.perf_counter() - start
            )
            self.telemetry.failure(f"{action.name} on {source}", e)
            raise

        elapsed = time.perf_counter() - start
        target = self.current_state.kind
        ACTION_SECONDS.labels(action=action.name, screen=source).observe(elapsed)
        SCREEN_CHANGES.labels(action=action.name, source=source, target=target).inc()
        self.telemetry.event(
            f"{source} --[{action.name}]--> {target}",
            ms=round(elapsed * 1000, 2),
        )
        return result

    return wrapper
