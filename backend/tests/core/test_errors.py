"""Error Hierarchy — status codes, categories, and the public response shape."""

from blogsphere.core.errors import (
    BlogsphereError, ErrorCategory, ErrorSeverity,
    MalformedBodyError, MissingFieldsError, StorageError,
)


def test_missing_fields_is_client_error():
    err = MissingFieldsError(["email"], "Email is required")

    assert isinstance(err, BlogsphereError)
    assert err.http_status == 400
    assert err.code == "MISSING_FIELDS"
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"error": "Email is required"}


def test_malformed_body_is_client_error():
    err = MalformedBodyError()

    assert err.http_status == 400
    assert err.to_response() == {"error": "Malformed request body"}


def test_storage_error_is_opaque():
    err = StorageError("insert")

    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "insert"
    assert err.to_response() == {"error": "Server error"}


def test_error_str_is_message():
    assert str(MissingFieldsError(["name"], "All fields are required")) == (
        "All fields are required"
    )


def test_missing_fields_log_context_names_fields():
    err = MissingFieldsError(["name", "subject"], "All fields are required")

    assert err.log_context() == {
        "error_code": "MISSING_FIELDS",
        "category": "validation",
        "severity": "warning",
        "fields": ["name", "subject"],
    }


def test_storage_log_context_names_operation():
    ctx = StorageError("insert").log_context()

    assert ctx["operation"] == "insert"
    assert ctx["category"] == "database"
    assert "fields" not in ctx
