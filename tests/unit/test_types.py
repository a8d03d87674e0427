"""
Tests for the generic content types.
"""

import pytest
from pydantic import ValidationError

from g2o.types import (
    Content,
    FunctionCall,
    FunctionResponse,
    GenerateContentResponse,
    GenerationConfig,
    Part,
    PartKind,
)


class TestPart:
    """Tests for Part variants."""

    def test_kinds(self):
        """Should report the populated variant"""
        assert Part(text="a").kind is PartKind.TEXT
        assert Part(function_call=FunctionCall(name="f")).kind is PartKind.FUNCTION_CALL
        assert (
            Part(function_response=FunctionResponse(name="f")).kind is PartKind.FUNCTION_RESPONSE
        )
        assert Part().kind is PartKind.EMPTY

    def test_empty_text_is_text(self):
        """Should treat an empty string as a text part"""
        assert Part(text="").kind is PartKind.TEXT

    def test_rejects_two_variants(self):
        """Should reject a part holding more than one variant"""
        with pytest.raises(ValidationError, match="single variant"):
            Part(text="a", function_call=FunctionCall(name="f"))

    def test_rejects_two_variants_from_wire(self):
        """Should reject multi-variant camelCase dicts"""
        with pytest.raises(ValidationError):
            Part.model_validate(
                {"functionCall": {"name": "f"}, "functionResponse": {"name": "f"}}
            )

    def test_camel_case_round_trip(self):
        """Should accept and emit camelCase field names"""
        part = Part.model_validate({"functionCall": {"name": "lookup", "args": {"q": "x"}}})
        assert part.function_call.args == {"q": "x"}
        assert part.to_dict() == {"functionCall": {"name": "lookup", "args": {"q": "x"}}}


class TestContent:
    """Tests for Content."""

    def test_defaults(self):
        """Should default to no role and no parts"""
        content = Content()
        assert content.role is None
        assert content.parts == []


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_aliases(self):
        """Should accept wire names"""
        config = GenerationConfig.model_validate(
            {"temperature": 0.1, "topP": 0.2, "maxOutputTokens": 3}
        )
        assert config.top_p == 0.2
        assert config.max_output_tokens == 3

    def test_all_optional(self):
        """Should leave unset knobs as None"""
        config = GenerationConfig()
        assert config.to_dict() == {}


class TestGenerateContentResponse:
    """Tests for GenerateContentResponse helpers."""

    def test_text_without_candidates(self):
        """Should return None when there are no candidates"""
        assert GenerateContentResponse().text is None

    def test_text_joins_text_parts(self):
        """Should join the text parts of the first candidate"""
        response = GenerateContentResponse.model_validate(
            {
                "candidates": [
                    {
                        "content": {
                            "role": "model",
                            "parts": [{"text": "a"}, {"functionCall": {"name": "f"}}, {"text": "b"}],
                        }
                    }
                ]
            }
        )
        assert response.text == "ab"
