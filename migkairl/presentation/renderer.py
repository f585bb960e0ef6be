import os
from collections.abc import Callable
from typing import Any

import streamlit as st

from migkairl.core import PartyAction, View
from migkairl.shared.telemetry import Telemetry


class StreamlitRenderer:
    """
    Translates View DTOs into Streamlit widgets.
    """

    def __init__(self) -> None:
        self.telemetry = Telemetry("StreamlitRenderer")

    def render(
        self,
        view: View | None,
        callback_handler: Callable[[PartyAction, Any], None],
        entry_handler: Callable[[str], None],
    ) -> None:
        if not view:
            self.telemetry.event("View is None. Rendering fallback.")
            st.warning("Loading...")
            return

        self.telemetry.event(
            f"Rendering View: {view.type}", actions=len(view.actions)
        )

        if view.title:
            st.title(view.title)

        for line in view.lines:
            st.markdown(line)

        if view.image_path and os.path.exists(view.image_path):
            st.image(view.image_path, use_container_width=True)

        if view.has_entry:
            # Keyed per screen so the field survives reruns
            text = st.text_input(
                view.entry_prompt, value=view.entry_value, key=f"entry_{view.type}"
            )
            if text != view.entry_value:
                entry_handler(text)

        # Labels may repeat (six 'Kai' buttons), so keys are positional
        for index, action in enumerate(view.actions):
            button_type = (
                "primary" if action.action == PartyAction.SUBMIT_ANSWER else "secondary"
            )
            if st.button(
                action.label,
                key=f"{view.type}_{index}",
                type=button_type,
                use_container_width=True,
            ):
                callback_handler(action.action, action.payload)
