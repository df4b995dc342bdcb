import logging
import re
import threading
from typing import Callable, Optional

from src.domain.i18n import Language
from src.domain.models import FormData
from src.domain.rules import toggle_pulse_quality


logger = logging.getLogger(__name__)

MEASUREMENT_SECONDS = 15


class PulseSelector:
    def __init__(self, language: Language = Language.EN):
        self.language = language
        self.warning: Optional[str] = None

    def toggle(self, form: FormData, pulse_id: str) -> FormData:
        outcome = toggle_pulse_quality(form.pulse_qualities, pulse_id, self.language)
        self.warning = outcome.warning
        if outcome.warning:
            return form
        return form.merge({"pulse_qualities": outcome.selection})

    def selected_ids(self, form: FormData):
        return {q.id for q in form.pulse_qualities}


def set_bpm(form: FormData, text: str) -> FormData:
    """Manual BPM entry: non-digits are dropped and at most 3 digits kept."""
    digits = re.sub(r"\D", "", text or "")[:3]
    return form.merge({"bpm": digits})


class PulseMeasurement:
    """Guided tap count: the user taps each beat felt during ``duration`` seconds.

    ``on_complete`` receives the BPM as a string once the timer fires. The
    timer is released by ``cancel`` or on leaving a ``with`` block.
    """

    def __init__(
        self,
        on_complete: Callable[[str], None],
        duration: float = MEASUREMENT_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.on_complete = on_complete
        self.duration = duration
        self.timer_factory = timer_factory
        self.beats = 0
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        with self._lock:
            if self._timer is not None:
                return
            self.beats = 0
            self._timer = self.timer_factory(self.duration, self._finish)
            self._timer.daemon = True
            self._timer.start()

    def tap(self) -> None:
        with self._lock:
            if self._timer is not None:
                self.beats += 1

    def bpm(self) -> str:
        return str(round(self.beats * 60 / self.duration))

    def _finish(self) -> None:
        with self._lock:
            if self._timer is None:
                return
            self._timer = None
            result = self.bpm()
        logger.info("Pulse measurement finished: %s beats, %s BPM", self.beats, result)
        self.on_complete(result)

    def cancel(self) -> None:
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def __enter__(self) -> "PulseMeasurement":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()
