"""Tests for the CSS validator client."""

import io
import logging

import pytest

from tests.fakes import FakeResponse, FakeSession
from w3c_validators import CSSValidator, ParsingError
from w3c_validators.constants import CSS_VALIDATOR_URI


def test_validate_text_sends_get_with_text(soap_session) -> None:
    """Stylesheet text travels in the query string."""
    session = soap_session("css_invalid.xml")
    CSSValidator(session=session).validate_text("body { colr: blue }")

    method, url, kwargs = session.calls[0]
    assert method == "get"
    assert url == CSS_VALIDATOR_URI
    assert kwargs["params"]["text"] == "body { colr: blue }"
    assert kwargs["params"]["output"] == "soap12"


def test_validate_file_reads_file_object(soap_session) -> None:
    """Files are read and validated as text."""
    session = soap_session("css_invalid.xml")
    CSSValidator(session=session).validate_file(io.StringIO("p { color: red }"))

    assert session.calls[0][2]["params"]["text"] == "p { color: red }"


def test_missing_uri_and_text_raises_value_error() -> None:
    """Nothing to validate is rejected before sending."""
    session = FakeSession()
    with pytest.raises(ValueError, match="an uri or text is required"):
        CSSValidator(session=session).validate_uri(None)
    assert session.calls == []


def test_profile_warning_and_language_options(soap_session) -> None:
    """Setters become request parameters; bad warning levels are ignored."""
    session = soap_session("css_invalid.xml")
    validator = CSSValidator(session=session)
    validator.set_profile("css21")
    validator.set_warn_level("no")
    validator.set_warn_level("loud")
    validator.set_language("fr")

    validator.validate_uri("http://example.com/site.css")

    params = session.calls[0][2]["params"]
    assert params["profile"] == "css21"
    assert params["warning"] == "no"
    assert params["lang"] == "fr"
    assert params["uri"] == "http://example.com/site.css"


def test_parses_css_response(soap_session) -> None:
    """Messages are stamped with the uri of their list."""
    results = CSSValidator(session=soap_session("css_invalid.xml")).validate_text("x")

    assert results.validity is False
    assert results.css_level == "css3"
    assert results.checked_by == "http://jigsaw.w3.org/css-validator/"
    assert len(results.errors) == 1
    error = results.errors[0]
    assert error.line == 2
    assert error.message == "Property colr doesn't exist"
    assert error.uri == "file://localhost/TextArea"
    assert error.context == "body"
    assert error.skippedstring == "blue"
    assert error.errortype == "parse-error"
    warning = results.warnings[0]
    assert (warning.line, warning.level) == (3, 0)
    assert warning.uri == "file://localhost/TextArea"


def test_non_css_response_raises_parsing_error() -> None:
    """A body without a cssvalidationresponse is a parsing error."""
    session = FakeSession(FakeResponse(b"<?xml version='1.0'?><nothing/>"))
    with pytest.raises(ParsingError):
        CSSValidator(session=session).validate_text("x")


def test_unknown_profile_is_logged_and_sent(soap_session, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown profile names still reach the validator."""
    session = soap_session("css_invalid.xml")
    validator = CSSValidator(session=session)

    with caplog.at_level(logging.WARNING, logger="w3c_validators.css_validator"):
        validator.set_profile("css4")
    validator.validate_text("p {}")

    assert "Unknown CSS profile 'css4'" in caplog.text
    assert session.calls[0][2]["params"]["profile"] == "css4"


def test_known_profile_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Profiles from CSS_PROFILES are accepted quietly."""
    with caplog.at_level(logging.WARNING, logger="w3c_validators.css_validator"):
        CSSValidator(session=FakeSession()).set_profile("css21")

    assert caplog.records == []


def test_css_parsing_error_is_raised_unwrapped() -> None:
    """A ParsingError from the parser keeps its own message."""
    session = FakeSession(FakeResponse(b"<?xml version='1.0'?><nothing/>"))
    with pytest.raises(ParsingError) as excinfo:
        CSSValidator(session=session).validate_text("x")

    assert str(excinfo.value) == "no cssvalidationresponse in response"
    assert excinfo.value.__cause__ is None
