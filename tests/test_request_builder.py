"""
Tests for request descriptor assembly.
Run from project root: python -m pytest tests/test_request_builder.py -v
"""
import json
import unittest

from pydantic import ValidationError

from errors import KeyCollisionError, ParameterShapeError, UnknownOperationError
from schemas.support import DescribeCasesOptions, Operation
from services.request_builder import (
    as_payload,
    build_request,
    merge_arguments,
    resolve_operation,
    target_header_value,
    wire_operation_name,
)

CONTENT_TYPE = ("content-type", "application/x-amz-json-1.1")


class TestOperationNames(unittest.TestCase):
    def test_wire_operation_name(self):
        self.assertEqual(
            wire_operation_name("describe_trusted_advisor_check_result"),
            "DescribeTrustedAdvisorCheckResult",
        )
        self.assertEqual(wire_operation_name(Operation.ADD_ATTACHMENTS_TO_SET), "AddAttachmentsToSet")

    def test_target_header(self):
        self.assertEqual(target_header_value(Operation.CREATE_CASE), "AWSSupport_20130415.CreateCase")

    def test_resolve_operation(self):
        self.assertIs(resolve_operation("resolve_case"), Operation.RESOLVE_CASE)
        self.assertIs(resolve_operation(Operation.RESOLVE_CASE), Operation.RESOLVE_CASE)

    def test_unknown_operation(self):
        for name in ["delete_everything", "CreateCase", ""]:
            with self.subTest(name=name):
                with self.assertRaises(UnknownOperationError):
                    build_request(name, {})


class TestBuildRequest(unittest.TestCase):
    def test_descriptor_fields(self):
        op = build_request(Operation.CREATE_CASE, {"subject": "Subject", "communication_body": "Body"})
        self.assertEqual(op.method, "POST")
        self.assertEqual(op.service, "support")
        self.assertEqual(
            op.headers,
            (("x-amz-target", "AWSSupport_20130415.CreateCase"), CONTENT_TYPE),
        )
        self.assertEqual(op.body, {"subject": "Subject", "communicationBody": "Body"})
        self.assertEqual(op.target, "AWSSupport_20130415.CreateCase")
        self.assertEqual(op.header("Content-Type"), "application/x-amz-json-1.1")
        self.assertIsNone(op.header("authorization"))

    def test_describe_cases_body(self):
        op = build_request(
            "describe_cases",
            {"after_time": "2018-12-01T01:00", "include_resolved_cases": True},
        )
        self.assertEqual(op.body, {"afterTime": "2018-12-01T01:00", "includeResolvedCases": True})
        self.assertEqual(
            json.loads(op.json_body()),
            {"afterTime": "2018-12-01T01:00", "includeResolvedCases": True},
        )

    def test_empty_payload(self):
        op = build_request(Operation.DESCRIBE_CASES)
        self.assertEqual(op.body, {})
        self.assertEqual(op.json_body(), b"{}")

    def test_pair_list_payload(self):
        op = build_request(Operation.DESCRIBE_CASES, [("max_results", 10), ("next_token", "t")])
        self.assertEqual(op.body, {"maxResults": 10, "nextToken": "t"})

    def test_model_payload_drops_unset_fields(self):
        op = build_request(Operation.DESCRIBE_CASES, DescribeCasesOptions(display_id="123"))
        self.assertEqual(op.body, {"displayId": "123"})

    def test_bad_payload_shapes(self):
        for payload in ["case_id", 42, [("only_key",)], [1, 2]]:
            with self.subTest(payload=payload):
                with self.assertRaises(ParameterShapeError):
                    build_request(Operation.DESCRIBE_CASES, payload)

    def test_duplicate_pair_rejected(self):
        with self.assertRaises(ParameterShapeError):
            as_payload([("language", "en"), ("language", "ja")])

    def test_collision_rejected(self):
        with self.assertRaises(KeyCollisionError):
            build_request(Operation.RESOLVE_CASE, {"case_id": "a", "caseId": "b"})

    def test_blob_body_base64(self):
        op = build_request(
            Operation.ADD_ATTACHMENTS_TO_SET,
            {"attachments": [{"data": b"hello", "file_name": "a.txt"}]},
        )
        self.assertEqual(op.body["attachments"][0]["data"], b"hello")
        self.assertEqual(
            json.loads(op.json_body()),
            {"attachments": [{"data": "aGVsbG8=", "fileName": "a.txt"}]},
        )

    def test_body_keeps_non_ascii_text(self):
        op = build_request(Operation.CREATE_CASE, {"subject": "caf\u00e9"})
        self.assertEqual(op.json_body(), "{\"subject\":\"caf\u00e9\"}".encode("utf-8"))

    def test_unencodable_text_rejected(self):
        op = build_request(Operation.RESOLVE_CASE, {"case_id": "\ud800"})
        with self.assertRaises(ParameterShapeError):
            op.json_body()

    def test_descriptor_is_frozen(self):
        op = build_request(Operation.RESOLVE_CASE, {"case_id": "c"})
        with self.assertRaises(ValidationError):
            op.method = "GET"


class TestMergeArguments(unittest.TestCase):
    def test_none_fields_omitted(self):
        self.assertEqual(merge_arguments(None, case_id="c", attachment_set_id=None), {"case_id": "c"})

    def test_fields_override_bag(self):
        merged = merge_arguments({"subject": "old", "communicationBody": "old", "language": "ja"},
                                 subject="new", communication_body="new")
        self.assertEqual(merged, {"language": "ja", "subject": "new", "communication_body": "new"})


if __name__ == "__main__":
    unittest.main()
