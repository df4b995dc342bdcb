import json
import logging
import re
from typing import Any, Callable, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.domain.errors import AnalysisError
from src.domain.i18n import Language, TranslationKey as K, translate


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_FENCE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)
_OPTIONS = re.compile(r"<OPTIONS>(.*?)</OPTIONS>", re.IGNORECASE | re.DOTALL)


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text or "").strip()


def extract_json(text: str) -> Dict[str, Any]:
    """Parse the first JSON object in an AI response.

    Markdown fences and prose before the opening ``{`` or after the last
    ``}`` are tolerated.
    """
    raw = strip_code_fences(text)
    if not raw.startswith("{"):
        start_idx = raw.find("{")
        if start_idx != -1:
            raw = raw[start_idx:]
    if not raw.endswith("}"):
        end_idx = raw.rfind("}")
        if end_idx != -1:
            raw = raw[:end_idx + 1]
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("AI response is not valid JSON: %s. Raw: %s", e, raw[:200])
        raise AnalysisError("AI response is not valid JSON") from e
    if not isinstance(data, dict):
        raise AnalysisError("AI response is not a JSON object")
    return data


def parse_analysis(text: str, schema: Type[SchemaT]) -> SchemaT:
    data = extract_json(text)
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.warning("AI response does not match %s: %s", schema.__name__, e)
        raise AnalysisError(f"AI response does not match {schema.__name__}") from e


def extract_options(text: str) -> Tuple[str, List[str]]:
    """Split an assistant reply into its visible text and suggested answers."""
    match = _OPTIONS.search(text or "")
    if not match:
        return (text or "").strip(), []
    clean = _OPTIONS.sub("", text, count=1).strip()
    options = [o.strip() for o in match.group(1).split(",") if o.strip()]
    return clean, options


def _any(*words: str) -> Callable[[str], bool]:
    return lambda q: any(w in q for w in words)


def _location(q: str) -> bool:
    return "where" in q and any(w in q for w in ("pain", "feel", "hurt"))


# Tested in order; the first matching rule wins.
_OPTION_RULES: Tuple[Tuple[Callable[[str], bool], Tuple[K, ...]], ...] = (
    (
        _any("how long", "how many days", "since when"),
        (K.OPT_FEW_DAYS, K.OPT_ONE_TWO_WEEKS, K.OPT_MONTH, K.OPT_MONTHS),
    ),
    (
        _any("how often", "how frequently", "how many times"),
        (K.OPT_EVERY_DAY, K.OPT_FEW_TIMES_WEEK, K.OPT_ONCE_WEEK, K.OPT_OCCASIONALLY),
    ),
    (
        _any("how severe", "intensity", "how bad"),
        (K.OPT_MILD, K.OPT_MODERATE, K.OPT_SEVERE, K.OPT_INTENSE),
    ),
    (
        _any("sleep", "rest", "tired"),
        (K.OPT_SLEEP_WELL, K.OPT_TROUBLE_SLEEP, K.OPT_WAKE_OFTEN, K.OPT_TIRED),
    ),
    (
        _any("eat", "food", "appetite", "diet"),
        (K.OPT_NORMAL_APPETITE, K.OPT_REDUCED_APPETITE, K.OPT_INCREASED_APPETITE, K.OPT_IRREGULAR_MEALS),
    ),
    (
        _any("stress", "anxious", "mood", "emotion"),
        (K.OPT_CALM, K.OPT_MILD_STRESS, K.OPT_ANXIOUS, K.OPT_VERY_STRESSED),
    ),
    (
        _any("when do", "what time", "when does"),
        (K.OPT_MORNING, K.OPT_AFTERNOON, K.OPT_EVENING, K.OPT_NIGHT),
    ),
    (
        _location,
        (K.OPT_HEAD, K.OPT_CHEST, K.OPT_STOMACH, K.OPT_LIMBS),
    ),
    (
        _any("do you", "have you", "are you", "does it"),
        (K.OPT_YES_FREQUENTLY, K.OPT_YES_SOMETIMES, K.OPT_RARELY, K.OPT_NO_NEVER),
    ),
)

_GENERIC_OPTIONS = (K.YES, K.NO, K.SOMETIMES, K.NOT_SURE)


def fallback_options(question: str, language: Language = Language.EN) -> List[str]:
    q = (question or "").lower()
    keys = _GENERIC_OPTIONS
    for matches, option_keys in _OPTION_RULES:
        if matches(q):
            keys = option_keys
            break
    return [translate(key, language) for key in keys]
