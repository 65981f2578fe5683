"""
Unit tests for error types and the error logging helper.
"""

import logging
import unittest

from mediaproxy_common.services.fingerprint import decode
from mediaproxy_common.utils.error_handlers import (
    Base64Error,
    DecodeErrorKind,
    FingerprintDecodeError,
    JsonError,
    MediaProxyError,
    UnrecognizedVariant,
    Utf8Error,
    log_error,
)

LOGGER_NAME = "mediaproxy_common.utils.error_handlers"


class TestErrorTaxonomy(unittest.TestCase):
    """Test the decode error hierarchy."""

    def test_one_class_per_kind(self):
        classes = [Base64Error, Utf8Error, JsonError, UnrecognizedVariant]
        self.assertEqual({cls.kind for cls in classes}, set(DecodeErrorKind))
        for cls in classes:
            self.assertTrue(issubclass(cls, FingerprintDecodeError))
            self.assertTrue(issubclass(cls, MediaProxyError))
            self.assertFalse(issubclass(cls, ValueError))

    def test_codes(self):
        self.assertEqual(Base64Error().code, "BASE64_ERROR")
        self.assertEqual(Utf8Error().code, "UNICODE_ERROR")
        self.assertEqual(JsonError().code, "JSON_ERROR")
        self.assertEqual(UnrecognizedVariant("bmp", "OutputFormat").code, "UNRECOGNIZED_VARIANT_ERROR")

    def test_wrapped_cause(self):
        cause = ValueError("boom")
        error = JsonError(source=cause)
        self.assertIs(error.source, cause)
        self.assertIs(error.__cause__, cause)
        self.assertEqual(error.details["cause"], "boom")
        self.assertEqual(error.details["stage"], "json")

    def test_unrecognized_variant_details(self):
        error = UnrecognizedVariant("bmp", "OutputFormat")
        self.assertEqual(error.token, "bmp")
        self.assertEqual(error.enum_name, "OutputFormat")
        self.assertIn("'bmp'", str(error))
        self.assertEqual(error.details["token"], "bmp")
        self.assertEqual(error.details["enum"], "OutputFormat")

    def test_to_dict(self):
        error = Base64Error("bad input", details={"offset": 4})
        self.assertEqual(error.to_dict(), {
            "code": "BASE64_ERROR",
            "message": "bad input",
            "details": {"offset": 4, "stage": "base64"}
        })

    def test_base_error_defaults(self):
        error = MediaProxyError("something")
        self.assertEqual(error.code, "MEDIAPROXY_ERROR")
        self.assertEqual(error.details, {})
        self.assertEqual(str(error), "something")


class TestLogError(unittest.TestCase):
    """Test logging of errors for diagnostics."""

    def test_decode_error_logged_as_warning(self):
        with self.assertRaises(FingerprintDecodeError) as ctx:
            decode("not base64!")
        error = ctx.exception

        with self.assertLogs(LOGGER_NAME, level="WARNING") as logs:
            log_error(error, context={"fingerprint": "not base64!"})

        self.assertEqual(len(logs.records), 1)
        record = logs.records[0]
        self.assertEqual(record.levelno, logging.WARNING)
        self.assertIn("BASE64_ERROR", record.getMessage())
        self.assertEqual(record.error_code, "BASE64_ERROR")
        self.assertEqual(record.context, {"fingerprint": "not base64!"})

    def test_other_error_logged_as_error(self):
        with self.assertLogs(LOGGER_NAME, level="ERROR") as logs:
            log_error(RuntimeError("unexpected"))

        record = logs.records[0]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertEqual(record.error_type, "RuntimeError")
        self.assertEqual(record.error_message, "unexpected")


if __name__ == '__main__':
    unittest.main()
