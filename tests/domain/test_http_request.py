import copy
import dataclasses
import pickle

import pytest

from patterncraft.domain.core.exceptions import (
    MissingRequiredFieldError,
    OutOfRangeError,
    ValidationError,
    ValidationReason,
)
from patterncraft.domain.http import HttpRequest, HttpRequestBuilder


def test_build_with_all_fields(api_request):
    # Assert
    assert api_request.url == "https://api.example.com/users"
    assert api_request.method == "POST"
    assert api_request.headers == {
        "Content-Type": "application/json",
        "Authorization": "Bearer token123",
    }
    assert api_request.body == '{"name": "John Doe"}'
    assert api_request.timeout == 60
    assert api_request.follow_redirects is True


def test_build_applies_defaults():
    # Act
    request = HttpRequest.builder().url("https://example.com").build()

    # Assert
    assert request.method == "GET"
    assert request.timeout == 30
    assert request.follow_redirects is True
    assert request.body == ""
    assert dict(request.headers) == {}


def test_builder_returns_itself_for_chaining():
    builder = HttpRequestBuilder()

    assert builder.url("https://example.com") is builder
    assert builder.method("PUT") is builder
    assert builder.header("X-Trace", "1") is builder
    assert builder.headers({"X-Other": "2"}) is builder
    assert builder.body("payload") is builder
    assert builder.timeout(5) is builder
    assert builder.follow_redirects(False) is builder


def test_header_last_write_wins():
    request = (
        HttpRequest.builder()
        .url("https://example.com")
        .header("Accept", "text/plain")
        .headers({"Accept": "application/json", "X-Id": "7"})
        .header("X-Id", "8")
        .build()
    )

    assert request.headers == {"Accept": "application/json", "X-Id": "8"}


def test_missing_url_fails():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        HttpRequest.builder().method("POST").timeout(-5).build()

    assert exc_info.value.reason == ValidationReason.MISSING_REQUIRED_FIELD
    assert exc_info.value.field_name == "url"


def test_explicit_none_url_fails():
    with pytest.raises(ValidationError) as exc_info:
        HttpRequest.builder().url(None).build()

    assert exc_info.value.reason == ValidationReason.MISSING_REQUIRED_FIELD
    assert "url" in str(exc_info.value)


def test_explicit_none_method_fails():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        HttpRequest.builder().url("https://x").method(None).build()

    assert exc_info.value.field_name == "method"


def test_explicit_none_timeout_fails():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        HttpRequest.builder().url("https://x").timeout(None).build()

    assert exc_info.value.reason == ValidationReason.MISSING_REQUIRED_FIELD
    assert exc_info.value.field_name == "timeout"


def test_missing_method_reported_before_bad_timeout():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        HttpRequest.builder().url("https://x").method(None).timeout(-1).build()

    assert exc_info.value.field_name == "method"


def test_negative_timeout_fails():
    with pytest.raises(OutOfRangeError) as exc_info:
        HttpRequest.builder().url("https://x").timeout(-1).build()

    assert exc_info.value.reason == ValidationReason.OUT_OF_RANGE
    assert exc_info.value.field_name == "timeout"
    assert exc_info.value.details["value"] == -1


def test_zero_timeout_is_accepted():
    request = HttpRequest.builder().url("https://x").timeout(0).build()

    assert request.timeout == 0


def test_builder_is_reusable_and_snapshots_state():
    # Arrange
    builder = HttpRequest.builder().url("https://example.com").header("A", "1")

    # Act
    first = builder.build()
    builder.header("B", "2").header("A", "changed")
    second = builder.build()

    # Assert
    assert first.headers == {"A": "1"}
    assert second.headers == {"A": "changed", "B": "2"}


def test_failed_build_does_not_reset_builder():
    builder = HttpRequest.builder().timeout(-1)

    with pytest.raises(MissingRequiredFieldError):
        builder.build()

    request = builder.url("https://example.com").timeout(10).build()
    assert request.timeout == 10


def test_direct_construction_copies_headers():
    # Arrange
    headers = {"Accept": "application/json"}

    # Act
    request = HttpRequest("https://example.com", headers=headers)
    headers["Accept"] = "text/html"
    headers["Injected"] = "yes"

    # Assert
    assert request.headers == {"Accept": "application/json"}


def test_direct_construction_validates():
    with pytest.raises(MissingRequiredFieldError):
        HttpRequest(None)
    with pytest.raises(OutOfRangeError):
        HttpRequest("https://example.com", timeout=-10)


def test_headers_are_read_only(api_request):
    with pytest.raises(TypeError):
        api_request.headers["X-New"] = "value"


def test_fields_cannot_be_reassigned(api_request):
    with pytest.raises(AttributeError):
        api_request.url = "https://elsewhere.example.com"


def test_clone_is_equal_but_not_identical(api_request):
    # Act
    clone = api_request.clone()

    # Assert
    assert clone == api_request
    assert clone is not api_request
    assert clone.headers is not api_request.headers
    assert hash(clone) == hash(api_request)


def test_with_field_changes_only_that_field(api_request):
    # Act
    updated = api_request.with_body("{}")

    # Assert
    assert updated.body == "{}"
    assert updated.with_body(api_request.body) == api_request
    assert updated.url == api_request.url
    assert updated.method == api_request.method
    assert updated.headers == api_request.headers
    assert updated.timeout == api_request.timeout
    assert updated.follow_redirects == api_request.follow_redirects
    assert api_request.body == '{"name": "John Doe"}'


@pytest.mark.parametrize(
    "method_name, value, attribute",
    [
        ("with_url", "https://other.example.com", "url"),
        ("with_method", "DELETE", "method"),
        ("with_timeout", 5, "timeout"),
        ("with_follow_redirects", False, "follow_redirects"),
    ],
)
def test_derivations(api_request, method_name, value, attribute):
    updated = getattr(api_request, method_name)(value)

    assert getattr(updated, attribute) == value
    assert updated != api_request


def test_with_header_adds_without_touching_source(api_request):
    updated = api_request.with_header("X-Request-Id", "abc")

    assert updated.headers["X-Request-Id"] == "abc"
    assert "X-Request-Id" not in api_request.headers
    assert len(updated.headers) == len(api_request.headers) + 1


def test_with_headers_replaces_mapping(api_request):
    replacement = {"Accept": "*/*"}

    updated = api_request.with_headers(replacement)
    replacement["Accept"] = "mutated"

    assert updated.headers == {"Accept": "*/*"}


def test_derivation_validates(api_request):
    with pytest.raises(OutOfRangeError):
        api_request.with_timeout(-1)
    with pytest.raises(MissingRequiredFieldError):
        api_request.with_url(None)


def test_structural_equality():
    first = HttpRequest("https://example.com", headers={"A": "1", "B": "2"})
    second = HttpRequest("https://example.com", headers={"B": "2", "A": "1"})

    assert first == second
    assert first is not second
    assert len({first, second}) == 1
    assert first != first.with_header("A", "3")


def test_to_dict_returns_fresh_containers(api_request):
    data = api_request.to_dict()
    data["headers"]["X-New"] = "1"

    assert data["follow_redirects"] is True
    assert "X-New" not in api_request.headers


def test_deepcopy_is_equal_and_independent(api_request):
    duplicate = copy.deepcopy(api_request)

    assert duplicate == api_request
    assert duplicate is not api_request
    assert duplicate.headers is not api_request.headers
    with pytest.raises(TypeError):
        duplicate.headers["X-New"] = "1"


def test_pickle_round_trip(api_request):
    restored = pickle.loads(pickle.dumps(api_request))

    assert restored == api_request
    assert hash(restored) == hash(api_request)
    with pytest.raises(TypeError):
        restored.headers["X-New"] = "1"


def test_asdict_exposes_plain_values(api_request):
    data = dataclasses.asdict(api_request)

    assert data["url"] == "https://api.example.com/users"
    assert data["headers"] == {
        "Content-Type": "application/json",
        "Authorization": "Bearer token123",
    }
