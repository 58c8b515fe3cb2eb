import pytest
from gateway.app.core.config import Settings
from gateway.app.core.parameters import GenerationDefaults, ParameterResolver
from gateway.app.core.result import Err, ErrorKind, Ok
from gateway.app.core.validation import RequestDraft


@pytest.fixture
def resolver():
    return ParameterResolver(GenerationDefaults())


def test_defaults_applied_when_fields_absent(resolver):
    result = resolver.resolve(RequestDraft(prompt="Hello"), {"prompt": "Hello"})

    assert isinstance(result, Ok)
    request = result.value
    assert request.prompt == "Hello"
    assert request.max_tokens == 4000
    assert request.temperature == 0.7
    assert request.model_id == "gemma-2b-it"


def test_null_fields_take_defaults(resolver):
    result = resolver.resolve(
        RequestDraft(prompt="Hello"),
        {"max_tokens": None, "temperature": None, "model_id": None},
    )

    assert result.is_ok
    assert result.value.max_tokens == 4000
    assert result.value.model_id == "gemma-2b-it"


def test_explicit_fields_override_defaults(resolver):
    result = resolver.resolve(
        RequestDraft(prompt="P"),
        {"max_tokens": 10, "temperature": 0.2, "model_id": "X"},
    )

    assert result.is_ok
    assert result.value.max_tokens == 10
    assert result.value.temperature == 0.2
    assert result.value.model_id == "X"


def test_integer_temperature_is_accepted(resolver):
    result = resolver.resolve(RequestDraft(prompt="P"), {"temperature": 1})

    assert result.is_ok
    assert result.value.temperature == 1.0
    assert isinstance(result.value.temperature, float)


def test_unknown_fields_are_ignored(resolver):
    result = resolver.resolve(RequestDraft(prompt="P"), {"top_k": 5})

    assert result.is_ok


@pytest.mark.parametrize(
    "options, field",
    [
        ({"max_tokens": "ten"}, "max_tokens"),
        ({"max_tokens": 12.5}, "max_tokens"),
        ({"max_tokens": True}, "max_tokens"),
        ({"max_tokens": 0}, "max_tokens"),
        ({"max_tokens": -3}, "max_tokens"),
        ({"temperature": "hot"}, "temperature"),
        ({"temperature": float("nan")}, "temperature"),
        ({"temperature": float("inf")}, "temperature"),
        ({"model_id": 7}, "model_id"),
        ({"model_id": ""}, "model_id"),
    ],
)
def test_wrong_shapes_fail_validation(resolver, options, field):
    result = resolver.resolve(RequestDraft(prompt="P"), options)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.VALIDATION
    assert field in result.error.message


def test_resolution_is_deterministic(resolver):
    draft = RequestDraft(prompt="P")
    options = {"max_tokens": 10}

    assert resolver.resolve(draft, options) == resolver.resolve(draft, options)


def test_defaults_from_settings():
    settings = Settings(
        default_model_id="llama-3-8b",
        default_max_tokens=256,
        default_temperature=0.1,
    )
    resolver = ParameterResolver(GenerationDefaults.from_settings(settings))

    request = resolver.resolve(RequestDraft(prompt="P"), {}).value
    assert request.model_id == "llama-3-8b"
    assert request.max_tokens == 256
    assert request.temperature == 0.1
