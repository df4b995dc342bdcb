import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple

from src.domain.i18n import Language
from src.domain.models import FormData
from src.domain.rules import SELF_GATED_STEPS, can_proceed
from src.domain.steps import StepDescriptor, StepId, build_steps


logger = logging.getLogger(__name__)

Confirm = Callable[[], bool]


class StepContext(NamedTuple):
    data: FormData
    on_update: Callable[[Mapping[str, Any]], None]
    on_next: Optional[Callable[..., None]] = None
    on_back: Optional[Callable[[], None]] = None


class StepFailure(NamedTuple):
    step_id: Optional[StepId]
    error: Exception


StepRenderer = Callable[[StepContext], Any]

# Steps rendered with a back callback besides their own completion callback.
_BACK_CALLBACK_STEPS = frozenset({StepId.PROFILE_SUMMARY})


class WizardController:
    """Owns the current step index and the form record of one assessment.

    ``current_step`` ranges over ``[0, len(steps)]``; the last value is the
    results view. Movement is always by one step.
    """

    def __init__(
        self,
        is_logged_in: bool = False,
        language: Language = Language.EN,
        on_transition: Optional[Callable[[str], None]] = None,
        on_exit_to_dashboard: Optional[Callable[[], None]] = None,
        on_exit_to_login: Optional[Callable[[], None]] = None,
    ):
        self.is_logged_in = is_logged_in
        self.language = Language(language)
        self.on_transition = on_transition
        self.on_exit_to_dashboard = on_exit_to_dashboard
        self.on_exit_to_login = on_exit_to_login
        self.current_step = 0
        self.form_data = FormData()
        self.mount_key = 0
        self.failure: Optional[StepFailure] = None

    @property
    def steps(self) -> Tuple[StepDescriptor, ...]:
        return build_steps(self.is_logged_in, self.language)

    @property
    def showing_results(self) -> bool:
        return self.current_step >= len(self.steps)

    @property
    def current_step_id(self) -> Optional[StepId]:
        if self.showing_results:
            return None
        return self.steps[self.current_step].id

    @property
    def can_go_next(self) -> bool:
        return not self.showing_results and can_proceed(self.current_step_id, self.form_data)

    @property
    def uses_own_next(self) -> bool:
        """Whether the current step advances through its own completion callback."""
        return self.current_step_id in SELF_GATED_STEPS

    def _transition(self, direction: str) -> None:
        if self.on_transition is not None:
            self.on_transition(direction)

    def go_to_next(self) -> None:
        if self.current_step >= len(self.steps):
            return
        self._transition("next")
        self.current_step += 1
        self.failure = None

    def go_to_previous(self) -> None:
        if self.current_step <= 0:
            return
        self._transition("prev")
        self.current_step -= 1
        self.failure = None

    def press_next(self) -> bool:
        """The generic Next control; honours the gate."""
        if not self.can_go_next:
            return False
        self.go_to_next()
        return True

    def update(self, patch: Mapping[str, Any]) -> FormData:
        self.form_data = self.form_data.merge(patch)
        return self.form_data

    def commit(self, form: FormData) -> FormData:
        """Accepts a form produced by ``FormData.merge`` in a step controller."""
        if not isinstance(form, FormData):
            raise TypeError("commit expects a FormData instance")
        self.form_data = form
        return self.form_data

    def complete_step(self, patch: Optional[Mapping[str, Any]] = None) -> None:
        if patch:
            self.update(patch)
        self.go_to_next()

    def _rebuild(self, change: Callable[[], None]) -> None:
        step_id = self.current_step_id
        change()
        if step_id is None:
            self.current_step = len(self.steps)
            return
        ids = [s.id for s in self.steps]
        if step_id in ids:
            self.current_step = ids.index(step_id)
        else:
            self.current_step = min(self.current_step, len(self.steps))

    def set_language(self, language: Language) -> None:
        self._rebuild(lambda: setattr(self, "language", Language(language)))

    def set_logged_in(self, is_logged_in: bool) -> None:
        self._rebuild(lambda: setattr(self, "is_logged_in", is_logged_in))

    def start_new_assessment(self, confirm: Confirm) -> bool:
        if not confirm():
            return False
        logger.info("Starting a new assessment")
        self.form_data = FormData()
        self.current_step = 0
        self.failure = None
        self.mount_key += 1
        return True

    def request_exit(self, confirm: Confirm) -> bool:
        """Leave the wizard after the user confirms; in-progress data is lost."""
        if not confirm():
            return False
        exit_callback = self.on_exit_to_dashboard if self.is_logged_in else self.on_exit_to_login
        if exit_callback is not None:
            exit_callback()
        return True

    def step_context(self, step_id: StepId) -> StepContext:
        on_next = on_back = None
        if step_id in SELF_GATED_STEPS:
            on_next = self.complete_step
        if step_id in _BACK_CALLBACK_STEPS:
            on_back = self.go_to_previous
        return StepContext(self.form_data, self.update, on_next, on_back)

    def render_step(
        self,
        renderers: Dict[StepId, StepRenderer],
        results_renderer: StepRenderer,
    ) -> Any:
        """Renders the current step inside the error boundary.

        A renderer exception is recorded as ``failure`` instead of
        propagating; ``retry_step`` or ``back_from_failure`` clears it.
        """
        if self.showing_results:
            return results_renderer(StepContext(self.form_data, self.update))

        step_id = self.current_step_id
        renderer = renderers.get(step_id)
        if renderer is None:
            logger.warning("No renderer for step %s", step_id)
            return None
        try:
            return renderer(self.step_context(step_id))
        except Exception as e:
            logger.exception("Step %s failed to render", step_id)
            self.failure = StepFailure(step_id, e)
            return None

    def retry_step(self) -> None:
        self.failure = None
        self.mount_key += 1

    def back_from_failure(self) -> None:
        self.failure = None
        self.go_to_previous()
