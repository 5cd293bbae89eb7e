"""Prompt template for the resume/job description comparison."""

from src.constants.analysis_constants import AnalysisConstants

ANALYSIS_PROMPT_TEMPLATE = """You are an expert career coach and resume reviewer.
Compare the resume below against the job description and assess how well the candidate fits the role.

Respond with a single JSON object that has exactly these fields:
- "{score_field}": a number from {min_score} to {max_score} indicating how well the resume matches the job description.
- "{strengths_field}": an array of short strings, each a discrete strength of the resume that is relevant to the job.
- "{missing_field}": an array of short strings, each a skill or keyword present in the job description but absent from the resume.
- "{suggestions_field}": an array of short strings, each an actionable suggestion for improving the resume for this job.

The value of "{score_field}" must be between {min_score} and {max_score} inclusive.
Do not add other fields. Do not wrap the JSON in markdown.

Resume:
---
{resume_text}
---

Job Description:
---
{job_description_text}
---
"""


def build_analysis_prompt(resume_text: str, job_description_text: str) -> str:
    """Embed both texts verbatim in the analysis instruction prompt."""
    return ANALYSIS_PROMPT_TEMPLATE.format(
        score_field=AnalysisConstants.FIELD_MATCH_SCORE,
        strengths_field=AnalysisConstants.FIELD_STRENGTHS,
        missing_field=AnalysisConstants.FIELD_MISSING_KEYWORDS,
        suggestions_field=AnalysisConstants.FIELD_SUGGESTIONS,
        min_score=AnalysisConstants.MIN_MATCH_SCORE,
        max_score=AnalysisConstants.MAX_MATCH_SCORE,
        resume_text=resume_text,
        job_description_text=job_description_text,
    )
