import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from notion_cli.core.diagnostics import describe, redact_context
from notion_cli.core.errors import (
    CommandFailed,
    InvalidInput,
    NotAuthenticated,
    ServiceRejected,
    TransportFailure,
    command_context,
)


def test_context_is_redacted():
    diag = describe(RuntimeError("boom"), "Get page", {"token": "secret_abc", "pageId": "p1"})
    text = diag.render()
    assert "p1" in text
    assert "secret_abc" not in text
    assert "token: [REDACTED]" in text
    assert diag.exit_code == 1


def test_redaction_is_case_insensitive():
    ctx = redact_context({"NotionToken": "a", "clientSecret": "b", "title": "c"})
    assert ctx == {"NotionToken": "[REDACTED]", "clientSecret": "[REDACTED]", "title": "c"}


def test_service_code_wins_over_status():
    err = ServiceRejected("unauthorized", "API token is invalid.", status=401)
    text = describe(err, "List pages").render()
    assert text.startswith("✗ List pages failed")
    assert "token may be invalid or expired" in text
    assert "notion auth login" in text


def test_validation_error_includes_message():
    err = ServiceRejected("validation_error", "body.parent should be defined", status=400)
    assert "Validation error: body.parent should be defined" in describe(err, "Create page").render()


def test_unknown_code_falls_back_to_message():
    err = ServiceRejected("teapot", "short and stout", status=418)
    assert "Error: short and stout" in describe(err, "Get page").render()


def test_status_mapping_without_code():
    assert "Permission denied." in describe(TransportFailure("nope", status=403), "Get page").render()
    assert "Notion server error" in describe(TransportFailure("x", status=503), "Get page").render()
    assert "HTTP 418 error." in describe(TransportFailure("x", status=418), "Get page").render()


def test_network_failure():
    text = describe(TransportFailure("refused", network=True), "List pages").render()
    assert text.startswith("✗ Network error")
    assert "internet connection" in text


def test_generic_error_keeps_message():
    assert describe(ValueError("weird"), "Get page").lines[0] == "✗ Get page failed: weird"


def test_not_authenticated_hint():
    text = describe(NotAuthenticated(), "List pages").render()
    assert "Not authenticated" in text
    assert 'notion auth login' in text


def test_command_failed_carries_operation_and_context():
    try:
        with command_context("Query database", databaseId="db1", filter="not-json", secretKey="s3"):
            raise InvalidInput("Invalid filter JSON", hint="Filter must be valid JSON")
    except CommandFailed as failure:
        text = describe(failure).render()
    assert text.splitlines()[:2] == ["✗ Invalid filter JSON", "  Filter must be valid JSON"]
    assert "databaseId: db1" in text
    assert "s3" not in text


def test_none_context_values_are_skipped():
    text = describe(RuntimeError("x"), "Update page", {"pageId": "p1", "title": None}).render()
    assert "title" not in text


def test_debug_details(monkeypatch):
    monkeypatch.setenv("NOTION_CLI_DEBUG", "1")
    text = describe(ValueError("weird"), "Get page").render()
    assert "ValueError: weird" in text
