"""Public RSVP page opened from ``?game=<id>`` links.

The ``RsvpConfirmationFlow`` object lives in ``st.session_state`` so the
state machine survives Streamlit reruns. One flow exists per session; it is
replaced when the link points to another game.
"""

from collections.abc import Callable
import time

import streamlit as st

from src.application.use_cases.rsvp_flow import (
    RsvpConfirmationFlow,
    RsvpPhase,
)
from src.domain.constants import (
    RSVP_ALREADY_CONFIRMED,
    RSVP_MEMBER_NOT_FOUND,
    RSVP_NICKNAME_REQUIRED,
    RSVP_NOT_FOUND,
    RSVP_TRY_AGAIN,
    RSVP_UNAVAILABLE,
)


FLOW_KEY = "rsvp_flow"

DISPLAY_MESSAGES = {
    RSVP_NOT_FOUND: "This game does not exist.",
    RSVP_UNAVAILABLE: "This game is no longer open for confirmations.",
    RSVP_NICKNAME_REQUIRED: "Please type your nickname.",
    RSVP_MEMBER_NOT_FOUND: "No member uses this nickname.",
    RSVP_ALREADY_CONFIRMED: "You already confirmed your attendance.",
    RSVP_TRY_AGAIN: "Something went wrong, please try again.",
}


def get_flow(
    game_id: str,
    build_flow: Callable[[str], RsvpConfirmationFlow],
) -> RsvpConfirmationFlow:
    """Return the session flow for ``game_id``, creating it when needed."""
    flow = st.session_state.get(FLOW_KEY)
    if flow is None or flow.game_id != (game_id or "").strip():
        flow = build_flow(game_id)
        st.session_state[FLOW_KEY] = flow
    return flow


def render_rsvp_page(
    game_id: str,
    build_flow: Callable[[str], RsvpConfirmationFlow],
    redirect_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Render the confirmation form of a game.

    Args:
        game_id: Game id read from the query string.
        build_flow: Factory creating a flow for a game id.
        redirect_seconds: Delay before leaving the page once confirmed.
        sleep: Blocking wait used before the redirect.
    """
    flow = get_flow(game_id, build_flow)
    state = flow.current_state()
    if state.phase is RsvpPhase.LOADING:
        state = flow.load()

    st.title("Confirm attendance")
    if state.game is not None:
        when = f"{state.game.date:%d/%m/%Y}"
        if state.game.time is not None:
            when = f"{when} {state.game.time:%H:%M}"
        st.subheader(f"{when} at {state.game.location}")

    if state.phase is RsvpPhase.CONFIRMED:
        st.success(
            f"Attendance confirmed. See you there, {state.member.nickname}!"
        )
        sleep(redirect_seconds)
        st.session_state.pop(FLOW_KEY, None)
        st.query_params.clear()
        st.rerun()
        return

    message = DISPLAY_MESSAGES.get(state.message, state.message)
    if state.phase is RsvpPhase.ERROR and not state.recoverable:
        st.error(message)
        return
    if message:
        st.warning(message)

    if state.can_reload:
        if st.button("Try again"):
            flow.load()
            st.rerun()
        return

    if state.can_submit:
        with st.form("rsvp_form"):
            nickname = st.text_input("Nickname")
            submitted = st.form_submit_button("Confirm")
        if submitted:
            flow.submit(nickname)
            st.rerun()


__all__ = ["FLOW_KEY", "DISPLAY_MESSAGES", "get_flow", "render_rsvp_page"]
