"""Unit tests for reply extraction and parsing."""

import json

import pytest

from print_assessment.errors import InvalidResponseFormatError, NoTextResponseError
from print_assessment.parsing import extract_json, extract_text, parse_analysis

REPLY = {"summary": "ok", "recommendations": [{"productId": "hp-e78625dn", "rank": 1}]}


class TestExtractText:
    """Test text block selection."""

    def test_first_text_block(self):
        blocks = [
            {"type": "tool_use", "id": "t1"},
            {"type": "text", "text": "first"},
            {"type": "text", "text": "second"},
        ]
        assert extract_text(blocks) == "first"

    def test_no_text_block(self):
        with pytest.raises(NoTextResponseError):
            extract_text([{"type": "tool_use", "id": "t1"}])

    def test_empty_content(self):
        with pytest.raises(NoTextResponseError):
            extract_text([])


class TestExtractJson:
    """Test fence-tolerant JSON recovery."""

    @pytest.mark.parametrize(
        "text",
        [
            json.dumps(REPLY),
            "  \n" + json.dumps(REPLY) + "\n ",
            "```json\n" + json.dumps(REPLY) + "\n```",
            "```\n" + json.dumps(REPLY) + "\n```",
            "Here you go:\n```json\n" + json.dumps(REPLY) + "\n```\nLet me know!",
        ],
    )
    def test_bare_and_fenced_agree(self, text):
        assert extract_json(text) == REPLY

    @pytest.mark.parametrize(
        "text",
        [
            "{not json}",
            "```json\n{\"summary\": \"ok\",}\n```",
            "Sorry, I cannot help with that.",
            "",
            '{"summary": "ok", "recommendations": [{"productId": "hp-e78625dn", "matchScore": NaN}]}',
            "```json\n{\"summary\": \"ok\", \"potentialSavings\": {\"annual\": -Infinity}}\n```",
            "Infinity",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidResponseFormatError):
            extract_json(text)

    def test_raw_text_logged(self, caplog):
        with pytest.raises(InvalidResponseFormatError):
            extract_json("totally not json")
        assert "totally not json" in caplog.text


class TestParseAnalysis:
    """Test structural validation of the parsed reply."""

    def test_minimal_reply(self):
        payload = parse_analysis(json.dumps(REPLY))

        assert payload.executive_summary == "ok"
        assert [rec.product_id for rec in payload.recommendations] == ["hp-e78625dn"]

    def test_non_finite_number_rejected(self):
        text = '{"summary":"ok","recommendations":[{"productId":"hp-e78625dn","matchScore":NaN}]}'
        with pytest.raises(InvalidResponseFormatError):
            parse_analysis(text)

    @pytest.mark.parametrize(
        "data",
        [
            [REPLY],
            {"summary": "ok"},
            {"summary": "ok", "recommendations": "hp-e78625dn"},
            {"summary": "ok", "recommendations": [{"rank": 1}]},
            {"summary": "ok", "recommendations": [{"productId": 42}]},
        ],
    )
    def test_structural_mismatch(self, data):
        with pytest.raises(InvalidResponseFormatError):
            parse_analysis(json.dumps(data))
