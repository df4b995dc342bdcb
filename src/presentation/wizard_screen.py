"""Wizard chrome: phase stepper, navigation, confirmations and the step error boundary."""
import streamlit as st

from src.domain.i18n import TranslationKey as K
from src.domain.steps import STEP_PHASES, phase_index
from src.presentation.session import sync_mount, t, wizard
from src.presentation.step_views import RENDERERS, render_results


def _render_stepper() -> None:
    controller = wizard()
    current_phase = phase_index(controller.current_step_id)
    cols = st.columns(len(STEP_PHASES))
    for index, (col, phase) in enumerate(zip(cols, STEP_PHASES)):
        label = t(phase.label_key)
        if index < current_phase:
            col.markdown(f"✅ {label}")
        elif index == current_phase:
            col.markdown(f"**● {label}**")
        else:
            col.markdown(f"○ {label}")

    total = len(controller.steps)
    st.progress(min(controller.current_step, total) / total)
    if not controller.showing_results:
        st.caption(t(K.STEP_PROGRESS, current=str(controller.current_step + 1), total=str(total)))


def _render_confirmation() -> bool:
    """Shows a pending exit or start-new confirmation. Returns True while one is open."""
    pending = st.session_state.get("pending_confirm")
    if not pending:
        return False

    message = t(K.EXIT_DIAGNOSIS) if pending == "exit" else t(K.START_NEW_CONFIRM)
    st.warning(message)
    col1, col2 = st.columns(2)
    if col1.button(t(K.CONFIRM), type="primary", use_container_width=True):
        st.session_state.pending_confirm = None
        if pending == "exit":
            wizard().request_exit(lambda: True)
        else:
            wizard().start_new_assessment(lambda: True)
        st.rerun()
    if col2.button(t(K.CANCEL), use_container_width=True):
        st.session_state.pending_confirm = None
        st.rerun()
    return True


def _render_failure() -> None:
    failure = wizard().failure
    st.error(t(K.STEP_FAILED))
    st.caption(str(failure.error))
    col1, col2 = st.columns(2)
    if col1.button(t(K.RETRY), type="primary", use_container_width=True):
        wizard().retry_step()
        st.rerun()
    if col2.button(t(K.GO_BACK), use_container_width=True):
        wizard().back_from_failure()
        st.rerun()


def _render_navigation() -> None:
    controller = wizard()
    if controller.showing_results:
        if st.button(t(K.START_NEW), use_container_width=True):
            st.session_state.pending_confirm = "start_new"
            st.rerun()
        return

    col1, col2 = st.columns(2)
    with col1:
        if st.button(t(K.BACK), disabled=controller.current_step == 0, use_container_width=True):
            controller.go_to_previous()
            st.rerun()
    with col2:
        if not controller.uses_own_next:
            if st.button(t(K.NEXT), disabled=not controller.can_go_next, type="primary", use_container_width=True):
                controller.press_next()
                st.rerun()


def show_wizard() -> None:
    controller = wizard()
    header, exit_col = st.columns([5, 1])
    header.markdown(f"## {t(K.APP_TITLE)}")
    if exit_col.button(t(K.EXIT), key="exit_wizard"):
        st.session_state.pending_confirm = "exit"
        st.rerun()

    _render_stepper()
    if _render_confirmation():
        return

    sync_mount()
    if controller.failure is not None:
        _render_failure()
        return

    controller.render_step(RENDERERS, render_results)
    if controller.failure is not None:
        # The renderer raised after drawing part of the page
        st.rerun()
    _render_navigation()
