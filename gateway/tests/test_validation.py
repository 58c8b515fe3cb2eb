import pytest
from gateway.app.core.result import Err, ErrorKind, Ok
from gateway.app.core.validation import RequestDraft, RequestValidator


@pytest.mark.parametrize(
    "body",
    [
        None,
        b"",
        b"   ",
        b"not json",
        b"[1, 2, 3]",
        b'"just a string"',
        b"{}",
        b'{"prompt": ""}',
        b'{"prompt": null}',
        b'{"prompt": 42}',
        b'{"max_tokens": 10}',
    ],
)
def test_invalid_bodies_fail_validation(body):
    result = RequestValidator().validate(body)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.message


def test_valid_body_produces_prompt_only_draft():
    result = RequestValidator().validate(
        b'{"prompt": "Hello", "max_tokens": 10, "model_id": "X"}'
    )

    assert isinstance(result, Ok)
    draft, payload = result.value
    assert draft == RequestDraft(prompt="Hello")
    assert payload["max_tokens"] == 10
    assert payload["model_id"] == "X"


def test_accepts_text_bodies():
    result = RequestValidator().validate('{"prompt": "Hi"}')

    assert result.is_ok
    assert result.value[0].prompt == "Hi"


def test_missing_prompt_message_names_the_field():
    result = RequestValidator().validate(b'{"temperature": 0.1}')

    assert not result.is_ok
    assert "prompt" in result.error.message


def test_deeply_nested_json_fails_validation():
    validator = RequestValidator()

    for body in (b"[" * 200000, b'{"prompt": ' * 200000):
        result = validator.validate(body)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.VALIDATION
