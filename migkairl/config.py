import os
from typing import Final


class GameConfig:
    # --- App Identity ---
    APP_TITLE = "Savisaac Migkairl!"
    PAGE_TITLE = "Savisaac Migkairl"
    SERVICE_NAME = "savisaac-migkairl"

    # --- Button Labels ---
    HOME_LABEL = "Home"
    TRIVIA_LABEL = "Trivia"
    UNIQUE_LABEL = "Unique"
    SUBMIT_LABEL = "Submit"
    REROLL_LABEL = "This question was already answered"
    CHOOSE_PERSON_PROMPT = "Who are you?"
    ENTRY_PROMPT = "Your answer"

    # --- Assets ---
    # Relative to project root
    OP_AMP_IMAGE_PATH = "assets/op_amp.png"

    # --- Miguel's circuit question ---
    MIGUEL_EXPECTED_ANSWER: Final[float] = 1.0
    MIGUEL_GIVE_DRINKS: Final[int] = 5
    MIGUEL_WRONG_DRINKS: Final[int] = 3

    # --- Observability ---
    METRICS_PORT = 8000
    SEED_ENV_VAR = "MIGKAIRL_SEED"

    @staticmethod
    def random_seed() -> int | None:
        """
        Seed for the trivia draw, read from the environment.
        Unset or malformed values mean 'use OS entropy'.
        """
        raw = os.getenv(GameConfig.SEED_ENV_VAR)
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return None
