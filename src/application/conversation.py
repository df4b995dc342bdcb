import logging
import time
import uuid
from typing import Callable, List, Optional, Sequence

from src.application.parsing import extract_options, fallback_options
from src.application.ports import ChatSession, CompletionProvider
from src.application.prompts import (
    CONSULTATION_PROMPT,
    SUMMARY_PROMPT,
    build_opening_prompt,
    build_patient_context,
    build_steering_prompt,
    build_summary_request,
    language_instruction,
)
from src.domain.errors import AnalysisError, CompletionError
from src.domain.i18n import Language, TranslationKey, translate
from src.domain.models import ChatMessage, FormData, MessageRole


logger = logging.getLogger(__name__)


def selected_model(form: FormData) -> Optional[str]:
    """AI model tier chosen on the select_doctor step, if any."""
    if form.doctor is None:
        return None
    return form.doctor.doctor_level.model


def format_transcript(messages: Sequence[ChatMessage]) -> str:
    return "\n".join(
        f"{'Patient' if m.role == MessageRole.USER else 'Doctor'}: {m.content}"
        for m in messages
    )


def _message(role: MessageRole, content: str) -> ChatMessage:
    return ChatMessage(id=uuid.uuid4().hex, role=role, content=content)


class InquiryConversation:
    """Drives the diagnostic inquiry chat (问诊).

    Every outgoing turn is steered towards a short question followed by an
    ``<OPTIONS>`` block; the suggested replies are kept in ``options``.
    A failed turn and its apology live in ``notice`` until the next send and
    are never written to the form.
    """

    def __init__(
        self,
        provider: CompletionProvider,
        language: Language = Language.EN,
        model: Optional[str] = None,
    ):
        self.provider = provider
        self.language = language
        self.model = model
        self.session: Optional[ChatSession] = None
        self.messages: List[ChatMessage] = []
        self.notice: List[ChatMessage] = []
        self.options: List[str] = []
        self.pending = False

    @property
    def started(self) -> bool:
        return self.session is not None

    @property
    def display_messages(self) -> List[ChatMessage]:
        return self.messages + self.notice

    def system_prompt(self, form: FormData) -> str:
        return CONSULTATION_PROMPT + build_patient_context(form) + language_instruction(self.language)

    def start(self, form: FormData) -> FormData:
        if self.started:
            return form
        self.session = self.provider.start_chat(
            self.system_prompt(form),
            model=self.model or selected_model(form),
            history=list(form.inquiry_chat),
        )
        if form.inquiry_chat:
            # Resuming after navigating back; the session replays the log.
            self.messages = list(form.inquiry_chat)
            last = self.messages[-1].content if self.messages else ""
            self.options = fallback_options(last, self.language)
            return form

        self.pending = True
        try:
            reply = self.session.send(build_steering_prompt(build_opening_prompt(form)))
        except CompletionError as e:
            logger.error("Failed to open inquiry: %s", e)
            intro = translate(TranslationKey.INQUIRY_FALLBACK_INTRO, self.language)
            self.messages = [_message(MessageRole.ASSISTANT, intro)]
            self.options = fallback_options(intro, self.language)
            return form
        finally:
            self.pending = False

        self._receive(reply)
        return self._merge(form)

    def send(self, text: str, form: FormData) -> FormData:
        text = (text or "").strip()
        if not text or self.pending or self.session is None:
            return form

        turn = _message(MessageRole.USER, text)
        self.notice = []
        self.options = []
        self.pending = True
        try:
            reply = self.session.send(build_steering_prompt(text))
        except CompletionError as e:
            logger.error("Inquiry turn failed: %s", e)
            self.notice = [
                turn,
                _message(MessageRole.ASSISTANT, translate(TranslationKey.INQUIRY_ERROR_RETRY, self.language)),
            ]
            self.options = [
                translate(TranslationKey.OPT_REPEAT, self.language),
                translate(TranslationKey.OPT_ASK_ELSE, self.language),
                translate(TranslationKey.OPT_CONTINUE, self.language),
            ]
            return form
        finally:
            self.pending = False

        self.messages.append(turn)
        self._receive(reply)
        return self._merge(form)

    def _receive(self, reply: str) -> None:
        clean, options = extract_options(reply)
        self.messages.append(_message(MessageRole.ASSISTANT, clean))
        self.options = options or fallback_options(clean, self.language)

    def _merge(self, form: FormData) -> FormData:
        return form.merge({
            "inquiry_chat": list(self.messages),
            "inquiry_summary": format_transcript(self.messages),
        })


class InquirySummarizer:
    def __init__(
        self,
        provider: CompletionProvider,
        language: Language = Language.EN,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.language = language
        self.clock = clock
        self.elapsed: Optional[float] = None

    @staticmethod
    def needs_summary(form: FormData) -> bool:
        """True while the summary is empty or still the raw chat transcript."""
        if not form.inquiry_chat:
            return not form.inquiry_summary.strip()
        summary = form.inquiry_summary.strip()
        return not summary or summary == format_transcript(form.inquiry_chat).strip()

    def generate(self, form: FormData) -> FormData:
        if not form.inquiry_chat:
            return form.merge({"inquiry_summary": translate(TranslationKey.NO_CONSULTATION, self.language)})

        started = self.clock()
        try:
            text = self.provider.complete(
                build_summary_request(form),
                system_prompt=SUMMARY_PROMPT + language_instruction(self.language),
                model=selected_model(form),
            )
        except CompletionError as e:
            logger.error("Summary generation failed: %s", e)
            raise AnalysisError("Failed to generate summary") from e
        finally:
            self.elapsed = self.clock() - started

        return form.merge({"inquiry_summary": text.strip()})

    @staticmethod
    def confirm(form: FormData, text: str) -> FormData:
        return form.merge({"inquiry_summary": (text or "").strip()})
