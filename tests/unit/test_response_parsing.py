"""Tests for parsing and validating raw analysis-service payloads."""

import json

import pytest

from src.error_handling.exceptions import ResponseFormatError
from src.error_handling.models import ErrorKind
from src.utils.response_parsing import (
    parse_analysis_response,
    strip_code_fences,
    validate_analysis_payload,
)


class TestStripCodeFences:
    def test_plain_json_untouched(self):
        assert strip_code_fences('{"a": 1}') == '{"a": 1}'

    def test_json_fence_removed(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence_removed(self):
        assert strip_code_fences('  ```\n{"a": 1}\n```  ') == '{"a": 1}'


class TestParseAnalysisResponse:
    def test_valid_payload(self, valid_payload):
        result = parse_analysis_response(json.dumps(valid_payload))

        assert result.match_score == 82
        assert result.strengths == ["Python", "Leadership"]

    def test_fenced_payload(self, valid_payload):
        raw = f"```json\n{json.dumps(valid_payload)}\n```"
        assert parse_analysis_response(raw).missing_keywords == ["Kubernetes"]

    @pytest.mark.parametrize("raw", ["", "   \n"])
    def test_empty_text(self, raw):
        with pytest.raises(ResponseFormatError):
            parse_analysis_response(raw)

    def test_not_json(self):
        with pytest.raises(ResponseFormatError) as exc_info:
            parse_analysis_response("Here is your analysis: great match!")

        assert exc_info.value.kind is ErrorKind.RESPONSE_FORMAT
        assert isinstance(exc_info.value.original_exception, json.JSONDecodeError)

    def test_json_array_rejected(self, valid_payload):
        with pytest.raises(ResponseFormatError, match="Expected a JSON object"):
            parse_analysis_response(json.dumps([valid_payload]))

    def test_out_of_range_score(self, valid_payload):
        valid_payload["matchScore"] = 150
        with pytest.raises(ResponseFormatError) as exc_info:
            parse_analysis_response(json.dumps(valid_payload))

        error = exc_info.value
        assert error.user_message == "The analysis service returned an unexpected format."
        assert error.context.additional_data["invalid_fields"] == ["matchScore"]

    def test_raw_snippet_kept_on_error(self):
        raw = json.dumps({"matchScore": 50, "notes": "x" * 500})
        with pytest.raises(ResponseFormatError) as exc_info:
            parse_analysis_response(raw)

        data = exc_info.value.context.additional_data
        assert data["raw_response_snippet"] == raw[:200]
        assert data["response_length"] == len(raw)


class TestValidateAnalysisPayload:
    def test_dict_payload(self, valid_payload):
        assert validate_analysis_payload(valid_payload).suggestions == [
            "Add a cloud project",
            "Quantify impact",
        ]

    @pytest.mark.parametrize("payload", [None, "text", 82, ["a"]])
    def test_non_object_payload(self, payload):
        with pytest.raises(ResponseFormatError):
            validate_analysis_payload(payload)

    def test_reports_every_invalid_field(self):
        with pytest.raises(ResponseFormatError) as exc_info:
            validate_analysis_payload({"matchScore": "high"})

        assert exc_info.value.context.additional_data["invalid_fields"] == [
            "matchScore",
            "missingKeywords",
            "strengths",
            "suggestions",
        ]
