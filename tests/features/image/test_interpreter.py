"""Tests for response interpretation."""

from __future__ import annotations

import pytest

from imggen.core.exceptions import ResponseParseError
from imggen.features.image import (
    GenerationFailure,
    GenerationSuccess,
    Outcome,
    interpret,
    parse_response,
)


def test_success_list_output(success_body: str) -> None:
    outcome = interpret(200, success_body, "list")

    assert outcome == Outcome(stdout="Image URL:\n http://x\n\nRevised Prompt:\n r\n", exit_code=0)


def test_success_json_output_is_raw_body(success_body: str) -> None:
    outcome = interpret(200, success_body, "json")

    assert outcome.stdout == success_body
    assert outcome.exit_code == 0


def test_unrecognized_output_format_prints_raw_body(success_body: str) -> None:
    assert interpret(200, success_body, "yaml").stdout == success_body


def test_error_list_output(error_body: str) -> None:
    outcome = interpret(400, error_body, "list")

    assert "bad prompt" in outcome.stdout
    assert outcome.stdout == "\nError:\n\n  bad prompt\n"
    assert outcome.exit_code == 1
    assert outcome.show_usage


def test_error_json_output_is_raw_body(error_body: str) -> None:
    outcome = interpret(400, error_body, "json")

    assert outcome == Outcome(stdout=error_body, exit_code=1)


def test_only_first_image_is_listed() -> None:
    body = (
        '{"created":1,"data":['
        '{"url":"http://first","revised_prompt":"one"},'
        '{"url":"http://second","revised_prompt":"two"}]}'
    )

    outcome = interpret(200, body, "list")

    assert "http://first" in outcome.stdout
    assert "http://second" not in outcome.stdout


@pytest.mark.parametrize(
    "status,body",
    [
        (200, "<html>Bad Gateway</html>"),
        (200, '{"created":1,"data":[]}'),
        (200, '{"created":1}'),
        (502, "<html>Bad Gateway</html>"),
        (500, '{"detail":"oops"}'),
    ],
)
def test_malformed_body_is_fatal_and_shows_body(status: int, body: str) -> None:
    for output_format in ("list", "json"):
        outcome = interpret(status, body, output_format)

        assert outcome.exit_code == 1
        assert "Failed to parse response, body is as follows:\n" + body in outcome.stdout
        assert not outcome.show_usage


def test_parse_success_keeps_optional_fields() -> None:
    body = '{"created":1700000000,"data":[{"b64_json":"aGVsbG8=","revised_prompt":null}]}'

    result = parse_response(200, body)

    assert result == GenerationSuccess(
        image_url="",
        revised_prompt="",
        b64_json="aGVsbG8=",
        created=1700000000,
    )


def test_parse_failure_keeps_error_fields() -> None:
    body = (
        '{"error":{"code":"content_policy_violation","message":"rejected",'
        '"param":null,"type":"invalid_request_error"}}'
    )

    result = parse_response(400, body)

    assert result == GenerationFailure(
        message="rejected",
        code="content_policy_violation",
        param=None,
        type="invalid_request_error",
        status_code=400,
    )


def test_parse_raises_on_invalid_json() -> None:
    with pytest.raises(ResponseParseError) as exc_info:
        parse_response(200, "not json")

    assert exc_info.value.body == "not json"
