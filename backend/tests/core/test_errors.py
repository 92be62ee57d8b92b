"""Error Hierarchy tests — codes, messages, and the response envelope.

Tests cover:
    - All recognized errors subclass ScriptOpsError
    - ApiToggleError message names the service and the action hint, nothing else
    - RemoteFetchError carries status text and status
    - MissingProjectError names the settings file
    - to_response() envelope shape; user_message overrides message
"""

from scriptops.core.errors import (
    ApiToggleError,
    CredentialsError,
    ErrorCategory,
    ErrorContext,
    InvalidServiceNameError,
    ManifestError,
    MissingProjectError,
    ProjectSettingsError,
    RemoteFetchError,
    ScriptOpsError,
)


def test_all_errors_share_base():
    errors = [
        MissingProjectError(),
        InvalidServiceNameError(),
        RemoteFetchError("Not Found", 404),
        ApiToggleError("enable", "fakeApi"),
        CredentialsError("x"),
        ProjectSettingsError("x", "/p"),
        ManifestError("x", "/m"),
    ]
    assert all(isinstance(e, ScriptOpsError) for e in errors)
    assert len({e.code for e in errors}) == len(errors)


def test_api_toggle_error_message():
    err = ApiToggleError("disable", "fakeApi")
    assert err.message == "API fakeApi doesn't exist. Try 'scriptops apis disable sheets'."
    assert err.action == "disable"
    assert err.service_name == "fakeApi"
    assert err.context.service_name == "fakeApi"
    assert err.category is ErrorCategory.EXTERNAL_API


def test_remote_fetch_error_carries_status_text():
    err = RemoteFetchError("Forbidden", 403)
    assert str(err) == "Forbidden"
    assert err.status_text == "Forbidden"
    assert err.status == 403


def test_remote_fetch_error_without_text_uses_status():
    assert RemoteFetchError("", 500).message == "Remote request failed with status 500"


def test_missing_project_error_names_file():
    assert MissingProjectError(".clasp.json").message == (
        "No projectId found in your .clasp.json file."
    )


def test_to_response_envelope():
    ctx = ErrorContext(project_id="p1", service_name="sheets", user_message="friendly")
    body = MissingProjectError(context=ctx).to_response()["error"]
    assert body["code"] == "NO_GCLOUD_PROJECT"
    assert body["message"] == "friendly"
    assert body["category"] == "configuration"
    assert body["context"]["project_id"] == "p1"
    assert "timestamp" in body
