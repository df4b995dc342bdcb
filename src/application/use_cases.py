import logging
from typing import Optional, Tuple

from src.application.conversation import selected_model
from src.application.parsing import parse_analysis
from src.application.ports import CompletionProvider
from src.application.prompts import (
    FINAL_ANALYSIS_PROMPT,
    REPAIR_INSTRUCTION,
    build_final_analysis_request,
)
from src.application.schemas import DiagnosisReport
from src.application.submission import ReportSubmitter, SubmissionResult
from src.domain.errors import AnalysisError, CompletionError
from src.domain.i18n import Language
from src.domain.models import FormData


logger = logging.getLogger(__name__)


class ReportGenerationUseCase:
    def __init__(self, provider: CompletionProvider, language: Language = Language.EN):
        self.provider = provider
        self.language = language

    def generate(self, form: FormData) -> DiagnosisReport:
        session = self.provider.start_chat(FINAL_ANALYSIS_PROMPT, model=selected_model(form))
        try:
            raw = session.send(build_final_analysis_request(form, self.language))
        except CompletionError as e:
            raise AnalysisError("Final analysis request failed") from e

        try:
            return parse_analysis(raw, DiagnosisReport)
        except AnalysisError as e:
            logger.warning("Report JSON invalid: %s. Attempting repair. Raw: %s", e, raw[:200])

        # Single repair attempt with stronger instruction
        try:
            raw = session.send(REPAIR_INSTRUCTION)
        except CompletionError as e:
            raise AnalysisError("Report repair request failed") from e
        return parse_analysis(raw, DiagnosisReport)


class AnalysisUseCase:
    """Final step: generate the report, keep it on the form, then persist."""

    def __init__(self, generator: ReportGenerationUseCase, submitter: ReportSubmitter):
        self.generator = generator
        self.submitter = submitter

    def run(self, form: FormData, user_id: Optional[str]) -> Tuple[FormData, SubmissionResult]:
        # A report kept from an earlier run is reused when only the save is retried.
        if form.report is None:
            report = self.generator.generate(form)
            form = form.merge({"report": report.model_dump()})
        return form, self.submitter.submit(form, user_id)
