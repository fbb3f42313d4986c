"""Error Hierarchy — status codes and REST envelope shape."""

from catalog_api.core.errors import (
    ConcurrencyError, DatabaseError, ErrorCategory, ErrorContext,
    IdentifierMismatchError, ResourceNotFoundError,
)


def test_identifier_mismatch_is_400_with_context():
    err = IdentifierMismatchError("Product", 3, 4)
    assert err.http_status == 400
    assert err.code == "ID_MISMATCH"
    assert err.context.entity == "Product"
    assert err.context.entity_id == 3
    assert "3" in err.message and "4" in err.message


def test_not_found_is_404():
    err = ResourceNotFoundError("Category", 1)
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "Category '1' not found"


def test_concurrency_conflict_is_fatal():
    err = ConcurrencyError("boom", ErrorContext(entity="Category", entity_id=9))
    assert err.http_status == 500
    assert err.severity.value == "critical"


def test_database_error_is_503():
    assert DatabaseError("down", "execute").http_status == 503


def test_to_response_envelope():
    body = ResourceNotFoundError("Product", 5).to_response()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["category"] == "resource_not_found"
    assert body["error"]["severity"] == "error"
    assert set(body["error"]["context"]) == {"entity", "entity_id"}
    assert "timestamp" in body["error"]
