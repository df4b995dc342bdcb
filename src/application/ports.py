from typing import Any, Dict, Optional, Protocol, Sequence

from src.domain.models import CapturedMedia, ChatMessage


class ChatSession(Protocol):
    def send(self, message: str) -> str:
        ...


class CompletionProvider(Protocol):
    def complete(
        self,
        prompt: str,
        media: Optional[CapturedMedia] = None,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        """
        Sends a prompt, optionally with one inline image or audio clip,
        and returns the free-text response. Raises CompletionError.
        """
        ...

    def start_chat(
        self,
        system_prompt: str,
        model: Optional[str] = None,
        history: Sequence[ChatMessage] = (),
    ) -> ChatSession:
        """
        Opens a conversation. ``history`` replays earlier turns of a
        resumed chat so the model sees them before the next message.
        """
        ...


class ReportStore(Protocol):
    def upload_media(self, user_id: str, report_id: str, kind: str, uri: str) -> str:
        """
        Uploads a local media file and returns its storage path.
        """
        ...

    def insert_report(self, payload: Dict[str, Any]) -> None:
        ...
