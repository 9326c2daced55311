import unittest

from recordbook.app import validation_message
from recordbook.errors import (
    ERR_BAD_DATE,
    ERR_BAD_REQUEST,
    ERR_MISSING_FIELDS,
    ERR_NO_QUERY,
    ERR_QUERY_MUST_BE_BOOL,
    ERR_QUERY_MUST_BE_INT,
    AuthError,
    ConflictError,
    HTTPResponseCode,
    NotFoundError,
    StoreError,
    ValidationError,
    interpret_error,
)


class InterpretErrorTests(unittest.TestCase):
    def test_store_errors_use_fixed_table(self):
        expected = {
            400: "Bad request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Item not found",
            409: "Conflict",
        }
        for code, message in expected.items():
            with self.subTest(code=code):
                self.assertEqual(
                    interpret_error(StoreError(code, "detail")),
                    HTTPResponseCode(code=code, message=message),
                )

    def test_other_store_codes_are_unexpected(self):
        self.assertEqual(
            interpret_error(StoreError(503)),
            HTTPResponseCode(code=503, message="Unexpected error"),
        )

    def test_api_errors_keep_their_message(self):
        self.assertEqual(
            interpret_error(ValidationError(ERR_BAD_DATE)),
            HTTPResponseCode(code=400, message=ERR_BAD_DATE),
        )
        self.assertEqual(interpret_error(AuthError("nope")).code, 401)
        self.assertEqual(interpret_error(NotFoundError()).message, "Item not found")
        self.assertEqual(interpret_error(ConflictError()).code, 409)

    def test_anything_else_is_500_with_raw_text(self):
        self.assertEqual(
            interpret_error(RuntimeError("boom")),
            HTTPResponseCode(code=500, message="boom"),
        )


class ValidationMessageTests(unittest.TestCase):
    def test_malformed_body(self):
        self.assertEqual(
            validation_message([{"type": "json_invalid", "loc": ("body", 1)}]),
            ERR_BAD_REQUEST,
        )

    def test_missing_beats_bad_date(self):
        errors = [
            {"type": "bad_date", "loc": ("body", "start_date")},
            {"type": "missing", "loc": ("body", "name")},
        ]
        self.assertEqual(validation_message(errors), ERR_MISSING_FIELDS)

    def test_bad_date(self):
        self.assertEqual(
            validation_message([{"type": "bad_date", "loc": ("body", "end_date")}]),
            ERR_BAD_DATE,
        )

    def test_query_parsing(self):
        self.assertEqual(
            validation_message([{"type": "int_parsing", "loc": ("query", "page")}]),
            ERR_QUERY_MUST_BE_INT,
        )
        self.assertEqual(
            validation_message(
                [{"type": "bool_parsing", "loc": ("query", "sort_by_newest")}]
            ),
            ERR_QUERY_MUST_BE_BOOL,
        )

    def test_missing_or_empty_query_parameter(self):
        for error_type in ("missing", "string_too_short"):
            with self.subTest(error_type=error_type):
                errors = [{"type": error_type, "loc": ("query", "projectID")}]
                self.assertEqual(validation_message(errors), ERR_NO_QUERY)

    def test_wrong_body_type_is_bad_request(self):
        self.assertEqual(
            validation_message([{"type": "int_parsing", "loc": ("body", "grade")}]),
            ERR_BAD_REQUEST,
        )


if __name__ == "__main__":
    unittest.main()
