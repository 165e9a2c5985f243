"""Tests for the bundled HTTP sample declarations.

Run with: pytest tests/test_sample_http.py
"""
from __future__ import annotations

from pydantic import BaseModel

from openstrenum.sample.http import Header, HttpMethod, MediaType


class Request(BaseModel):
    method: HttpMethod
    accept: MediaType = MediaType.JSON
    headers: list[Header] = []


class TestSampleDeclarations:
    def test_http_methods(self):
        assert [str(m) for m in HttpMethod] == ["GET", "POST", "DELETE"]

    def test_media_type_computed_default_is_last(self):
        values = [m.value for m in MediaType.get_members()]
        assert values == [
            "application/json",
            "text/plain",
            "application/octet-stream",
            "application/json",
        ]

    def test_media_type_charset(self):
        assert MediaType.parse("text/plain").charset == "utf-8"
        assert MediaType.parse("application/octet-stream").charset is None
        assert MediaType.DEFAULT == MediaType.JSON


class TestSampleModel:
    def test_round_trip(self):
        request = Request.model_validate_json(
            '{"method": "POST", "accept": "text/plain",'
            ' "headers": [{"value": "Content-Type", "required": true}]}'
        )
        assert request.method == HttpMethod.POST
        assert request.accept == MediaType.TEXT
        assert request.headers == [Header.CONTENT_TYPE]
        assert request.model_dump_json() == (
            '{"method":"POST","accept":"text/plain",'
            '"headers":[{"value":"Content-Type","required":true}]}'
        )

    def test_default_serializes_as_string(self):
        assert Request(method=HttpMethod.GET).model_dump() == {
            "method": "GET",
            "accept": "application/json",
            "headers": [],
        }
