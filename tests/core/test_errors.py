"""Error Hierarchy - codes, categories, statuses and the response envelope."""

import pytest

from photoalbum.core.errors import (
    CommandBatchError,
    CommandFormatError,
    DuplicateNameError,
    ErrorCategory,
    InvalidColorError,
    InvalidDimensionError,
    PhotoAlbumError,
    UnknownShapeError,
    UnknownShapeTypeError,
    UnknownSnapshotError,
)


@pytest.mark.parametrize("error, code, category, status", [
    (DuplicateNameError("R"), "DUPLICATE_NAME", ErrorCategory.CONFLICT, 409),
    (UnknownShapeTypeError("hex"), "UNKNOWN_SHAPE_TYPE", ErrorCategory.VALIDATION, 400),
    (UnknownShapeError("R"), "UNKNOWN_SHAPE", ErrorCategory.RESOURCE_NOT_FOUND, 404),
    (UnknownSnapshotError("s1"), "UNKNOWN_SNAPSHOT", ErrorCategory.RESOURCE_NOT_FOUND, 404),
    (InvalidColorError(2, 0, 0), "INVALID_COLOR", ErrorCategory.VALIDATION, 400),
    (InvalidDimensionError(0, 1), "INVALID_DIMENSION", ErrorCategory.VALIDATION, 400),
    (CommandFormatError("bad"), "FORMAT_ERROR", ErrorCategory.VALIDATION, 400),
])
def test_error_codes(error, code, category, status):
    assert isinstance(error, PhotoAlbumError)
    assert error.code == code
    assert error.category is category
    assert error.http_status == status


def test_to_response_envelope():
    body = UnknownShapeError("R").to_response()["error"]
    assert body["code"] == "UNKNOWN_SHAPE"
    assert body["message"] == "Shape 'R' not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["shape_name"] == "R"
    assert "timestamp" in body


def test_batch_error_message_names_line():
    cause = UnknownShapeError("ghost")
    err = CommandBatchError(3, "move ghost 1 1", cause)
    assert "line 3" in err.message
    assert err.to_response()["error"]["context"]["line_number"] == 3
    assert err.to_response()["error"]["context"]["command"] == "move ghost 1 1"
