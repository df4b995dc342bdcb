import base64
import logging
from typing import Any, Dict, List, Optional, Sequence

from src.application.ports import ChatSession, CompletionProvider
from src.domain.errors import CompletionError
from src.domain.models import CapturedMedia, ChatMessage
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


def _media_base64(media: CapturedMedia) -> str:
    if media.base64:
        return media.base64
    try:
        with open(media.uri, "rb") as f:
            return base64.b64encode(f.read()).decode("ascii")
    except OSError as e:
        raise CompletionError(f"Cannot read media at {media.uri}") from e


def _media_chunk(media: CapturedMedia) -> Dict[str, Any]:
    data = _media_base64(media)
    if media.mime_type.startswith("audio/"):
        return {"type": "input_audio", "input_audio": data}
    return {"type": "image_url", "image_url": f"data:{media.mime_type};base64,{data}"}


def _text_content(content: Any) -> str:
    # Some models answer with a list of typed chunks instead of a string
    if isinstance(content, str):
        return content
    parts = []
    for chunk in content or []:
        text = getattr(chunk, "text", None)
        if text is None and isinstance(chunk, dict):
            text = chunk.get("text")
        if text:
            parts.append(text)
    return "".join(parts)


class MistralChatSession(ChatSession):
    """Keeps the message history of one conversation with Mistral."""

    def __init__(
        self,
        adapter: "MistralCompletionProvider",
        system_prompt: str,
        model: str,
        history: Sequence[ChatMessage] = (),
    ):
        self.adapter = adapter
        self.model = model
        self.history: List[Dict[str, Any]] = [{"role": "system", "content": system_prompt}]
        self.history.extend({"role": m.role.value, "content": m.content} for m in history)

    def send(self, message: str) -> str:
        messages = self.history + [{"role": "user", "content": message}]
        reply = self.adapter._chat(messages, self.model)
        self.history = messages + [{"role": "assistant", "content": reply}]
        return reply


class MistralCompletionProvider(CompletionProvider):
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._client = None
        self._model = self.settings.mistral_model
        self._init_client()

    def _init_client(self):
        api_key = self.settings.mistral_api_key
        if not api_key:
            logger.error("Mistral API key is missing.")
            self._client = None
            return
        try:
            from mistralai import Mistral
            self._client = Mistral(api_key=api_key)
        except Exception as e:
            logger.exception("Failed to initialize Mistral client: %s", e)
            self._client = None

    def _model_for(self, media: Optional[CapturedMedia], model: Optional[str]) -> str:
        if media is None:
            return model or self._model
        if media.mime_type.startswith("audio/"):
            return self.settings.mistral_audio_model
        # Doctor tiers name text models; images always go to the vision model
        return self.settings.mistral_vision_model

    def _chat(self, messages: List[Dict[str, Any]], model: str) -> str:
        if not self._client:
            raise CompletionError("Mistral client not initialized (missing API key or import error)")
        try:
            response = self._client.chat.complete(model=model, messages=messages)
            return _text_content(response.choices[0].message.content)
        except Exception as e:
            logger.exception("Mistral chat call failed: %s", e)
            raise CompletionError(str(e)) from e

    def complete(
        self,
        prompt: str,
        media: Optional[CapturedMedia] = None,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        messages: List[Dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        if media is None:
            messages.append({"role": "user", "content": prompt})
        else:
            messages.append({
                "role": "user",
                "content": [{"type": "text", "text": prompt}, _media_chunk(media)],
            })
        return self._chat(messages, self._model_for(media, model))

    def start_chat(
        self,
        system_prompt: str,
        model: Optional[str] = None,
        history: Sequence[ChatMessage] = (),
    ) -> ChatSession:
        return MistralChatSession(self, system_prompt, model or self._model, history)
