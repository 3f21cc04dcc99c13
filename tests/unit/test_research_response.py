"""Tests for resolving research API payloads to markdown."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from site_intel.research.response import ResponseShape, extract_markdown, resolve_payload


class TestResolvePayload:
    @pytest.mark.parametrize(
        "raw,shape,markdown",
        [
            ("# Report", ResponseShape.TEXT, "# Report"),
            ({"content": "body"}, ResponseShape.CONTENT, "body"),
            ({"output": {"content": "nested"}}, ResponseShape.OUTPUT_CONTENT, "nested"),
            ({"markdown": "md"}, ResponseShape.MARKDOWN, "md"),
            ({"status": "completed"}, ResponseShape.EMPTY, ""),
            (None, ResponseShape.EMPTY, ""),
            (42, ResponseShape.EMPTY, ""),
        ],
    )
    def test_shapes(self, raw, shape, markdown):
        payload = resolve_payload(raw)
        assert payload.shape == shape
        assert payload.markdown == markdown

    def test_priority_content_over_output(self):
        raw = {"content": "top", "output": {"content": "nested"}, "markdown": "md"}
        assert resolve_payload(raw).shape == ResponseShape.CONTENT

    def test_priority_output_over_markdown(self):
        raw = {"output": {"content": "nested"}, "markdown": "md"}
        assert extract_markdown(raw) == "nested"

    def test_empty_string_counts_as_present(self):
        raw = {"content": "", "markdown": "md"}
        payload = resolve_payload(raw)
        assert payload.shape == ResponseShape.CONTENT
        assert payload.markdown == ""

    def test_non_string_values_fall_through(self):
        raw = {"content": {"parsed": True}, "output": "flat", "markdown": "md"}
        assert resolve_payload(raw).shape == ResponseShape.MARKDOWN

    def test_attribute_style_objects(self):
        raw = SimpleNamespace(output=SimpleNamespace(content="sdk body"))
        payload = resolve_payload(raw)
        assert payload.shape == ResponseShape.OUTPUT_CONTENT
        assert payload.markdown == "sdk body"

    def test_unknown_shape(self):
        assert extract_markdown({"result": "somewhere else"}) == ""
