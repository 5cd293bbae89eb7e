"""Analysis client: the contract between the app and the Gemini analysis service."""

import time
from typing import Any, Dict

from src.config.logging_config import get_logger
from src.config.settings import LLMConfig
from src.constants.analysis_constants import AnalysisConstants
from src.constants.error_constants import ErrorConstants
from src.error_handling.classification import ANALYSIS_EXCEPTIONS, classify_exception
from src.error_handling.exceptions import AnalyzerError, ValidationError
from src.models.analysis_models import (
    ANALYSIS_RESPONSE_SCHEMA,
    AnalysisOutcome,
    AnalysisResult,
)
from src.services.llm.llm_client_interface import LLMClientInterface
from src.templates.analysis_prompt import build_analysis_prompt
from src.utils.response_parsing import parse_analysis_response

logger = get_logger(__name__)


class AnalysisService:
    """Sends one resume/job description pair to the analysis service and validates the answer.

    A call is all-or-nothing: there are no retries, no caching and no
    partial results.
    """

    def __init__(self, llm_client: LLMClientInterface, llm_config: LLMConfig):
        self.llm_client = llm_client
        self.llm_config = llm_config

    def _generation_config(self) -> Dict[str, Any]:
        return {
            "response_mime_type": AnalysisConstants.RESPONSE_MIME_TYPE,
            "response_schema": ANALYSIS_RESPONSE_SCHEMA,
            "temperature": self.llm_config.temperature,
            "max_output_tokens": self.llm_config.max_output_tokens,
        }

    @staticmethod
    def _require_text(value: str, field_name: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(ErrorConstants.MSG_MISSING_INPUT, field_name=field_name)

    async def analyze(self, resume_text: str, job_description_text: str) -> AnalysisResult:
        """
        Compare a resume with a job description.

        Args:
            resume_text: Free-form resume text, non-empty after trimming.
            job_description_text: Free-form job description, non-empty after trimming.

        Returns:
            AnalysisResult: The validated report.

        Raises:
            ValidationError: If either text is empty.
            ServiceError: If the call to the service fails.
            ResponseFormatError: If the service answered with an unusable payload.
            UnknownError: For anything else.
        """
        self._require_text(resume_text, "resume_text")
        self._require_text(job_description_text, "job_description_text")

        prompt = build_analysis_prompt(resume_text, job_description_text)
        model_name = self.llm_client.get_model_name()
        logger.info(
            "Requesting analysis from %s (resume_chars=%d, job_description_chars=%d)",
            model_name,
            len(resume_text),
            len(job_description_text),
        )

        start_time = time.time()
        try:
            response = await self.llm_client.generate_content(
                prompt,
                generation_config=self._generation_config(),
                request_options={"timeout": self.llm_config.request_timeout},
            )
            raw_text = self.llm_client.extract_text(response)
        except ANALYSIS_EXCEPTIONS as e:
            error = classify_exception(e)
            error.with_context(operation="analyze", component=model_name)
            logger.error("Analysis service call failed: %s", error.message)
            if error is e:
                raise
            raise error from e

        result = parse_analysis_response(raw_text)
        logger.info(
            "Analysis completed in %.2fs (match_score=%d)",
            time.time() - start_time,
            result.match_score,
        )
        return result

    async def run(self, resume_text: str, job_description_text: str) -> AnalysisOutcome:
        """Run ``analyze`` and fold any failure into an AnalysisOutcome instead of raising."""
        try:
            return AnalysisOutcome.success(await self.analyze(resume_text, job_description_text))
        except ANALYSIS_EXCEPTIONS as e:
            error: AnalyzerError = classify_exception(e)
            logger.warning(
                "Analysis failed (%s): %s",
                error.kind.value,
                error.message,
                extra=error.to_structured_error().to_log_dict(),
            )
            return AnalysisOutcome.failure(error)
