"""
Operations of the AWS Support API.

Each function takes the operation's required arguments positionally plus an
optional bag of snake_case options, and returns a RequestDescriptor ready for
an HTTP client. Values are passed through unchecked; the service validates them.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Optional, Union

from schemas.request import RequestDescriptor
from schemas.support import (
    Attachment,
    CreateCaseOptions,
    DescribeCasesOptions,
    DescribeCommunicationsOptions,
    Operation,
)
from services.request_builder import build_request, merge_arguments

DEFAULT_LANGUAGE = "en"

AttachmentLike = Union[Attachment, dict[str, Any]]
CreateCaseOpts = Union[CreateCaseOptions, dict[str, Any], Sequence[tuple[str, Any]], None]
DescribeCasesOpts = Union[DescribeCasesOptions, dict[str, Any], Sequence[tuple[str, Any]], None]
DescribeCommunicationsOpts = Union[
    DescribeCommunicationsOptions, dict[str, Any], Sequence[tuple[str, Any]], None
]


def add_attachments_to_set(
    attachments: list[AttachmentLike],
    attachment_set_id: Optional[str] = None,
) -> RequestDescriptor:
    """
    Add one or more attachments to an attachment set.

    Without ``attachment_set_id`` a new set is created and its ID comes back in
    the response. Sets live for one hour and hold at most 3 attachments of 5 MB each.
    """
    payload = merge_arguments(None, attachments=list(attachments), attachment_set_id=attachment_set_id)
    return build_request(Operation.ADD_ATTACHMENTS_TO_SET, payload)


def add_communication_to_case(
    case_id: str,
    communication_body: str,
    attachment_set_id: Optional[str] = None,
    cc_email_addresses: Optional[list[str]] = None,
) -> RequestDescriptor:
    """
    Add customer communication to an existing case.

    ``attachment_set_id`` comes from add_attachments_to_set; ``cc_email_addresses``
    lists up to 10 addresses copied on the communication.
    """
    payload = merge_arguments(
        None,
        case_id=case_id,
        attachment_set_id=attachment_set_id,
        communication_body=communication_body,
        cc_email_addresses=cc_email_addresses,
    )
    return build_request(Operation.ADD_COMMUNICATION_TO_CASE, payload)


def create_case(subject: str, communication_body: str, opts: CreateCaseOpts = None) -> RequestDescriptor:
    """
    Open a new case in the AWS Support Center.

    Options: attachment_set_id, category_code, cc_email_addresses, issue_type
    ("customer-service" or "technical"), language, service_code, severity_code.
    Service and category codes come from describe_services, severity codes
    from describe_severity_levels.
    """
    payload = merge_arguments(opts, subject=subject, communication_body=communication_body)
    return build_request(Operation.CREATE_CASE, payload)


def describe_attachment(attachment_id: str) -> RequestDescriptor:
    return build_request(Operation.DESCRIBE_ATTACHMENT, {"attachment_id": attachment_id})


def describe_cases(opts: DescribeCasesOpts = None) -> RequestDescriptor:
    """
    List cases, optionally filtered by ID, display ID or date range.

    Times use the ``YYYY-MM-DDTHH:MM`` form. ``include_resolved_cases`` defaults
    to false on the service side. Paginate with max_results (10-100) and next_token.
    """
    return build_request(Operation.DESCRIBE_CASES, merge_arguments(opts))


def describe_communications(case_id: str, opts: DescribeCommunicationsOpts = None) -> RequestDescriptor:
    """Communications and attachments for one case, filterable by after_time/before_time."""
    return build_request(Operation.DESCRIBE_COMMUNICATIONS, merge_arguments(opts, case_id=case_id))


def describe_services(
    language: str = DEFAULT_LANGUAGE,
    service_code_list: Optional[list[str]] = None,
) -> RequestDescriptor:
    """
    AWS services and their categories, used for create_case's service_code and category_code.
    An empty ``service_code_list`` (the default) asks for every service.
    """
    payload = merge_arguments(None, language=language, service_code_list=list(service_code_list or []))
    return build_request(Operation.DESCRIBE_SERVICES, payload)


def describe_severity_levels(language: str = DEFAULT_LANGUAGE) -> RequestDescriptor:
    return build_request(Operation.DESCRIBE_SEVERITY_LEVELS, {"language": language})


def describe_trusted_advisor_check_refresh_statuses(check_ids: list[str]) -> RequestDescriptor:
    return build_request(
        Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_REFRESH_STATUSES,
        {"check_ids": check_ids},
    )


def describe_trusted_advisor_check_result(check_id: str, language: str = DEFAULT_LANGUAGE) -> RequestDescriptor:
    return build_request(
        Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_RESULT,
        {"check_id": check_id, "language": language},
    )


def describe_trusted_advisor_check_summaries(check_ids: list[str]) -> RequestDescriptor:
    return build_request(
        Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_SUMMARIES,
        {"check_ids": check_ids},
    )


def describe_trusted_advisor_checks(language: str = DEFAULT_LANGUAGE) -> RequestDescriptor:
    """All Trusted Advisor checks with name, ID, category and description."""
    return build_request(Operation.DESCRIBE_TRUSTED_ADVISOR_CHECKS, {"language": language})


def refresh_trusted_advisor_check(check_id: str) -> RequestDescriptor:
    return build_request(Operation.REFRESH_TRUSTED_ADVISOR_CHECK, {"check_id": check_id})


def resolve_case(case_id: str) -> RequestDescriptor:
    return build_request(Operation.RESOLVE_CASE, {"case_id": case_id})


OPERATIONS: dict[Operation, Callable[..., RequestDescriptor]] = {
    Operation.ADD_ATTACHMENTS_TO_SET: add_attachments_to_set,
    Operation.ADD_COMMUNICATION_TO_CASE: add_communication_to_case,
    Operation.CREATE_CASE: create_case,
    Operation.DESCRIBE_ATTACHMENT: describe_attachment,
    Operation.DESCRIBE_CASES: describe_cases,
    Operation.DESCRIBE_COMMUNICATIONS: describe_communications,
    Operation.DESCRIBE_SERVICES: describe_services,
    Operation.DESCRIBE_SEVERITY_LEVELS: describe_severity_levels,
    Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_REFRESH_STATUSES: describe_trusted_advisor_check_refresh_statuses,
    Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_RESULT: describe_trusted_advisor_check_result,
    Operation.DESCRIBE_TRUSTED_ADVISOR_CHECK_SUMMARIES: describe_trusted_advisor_check_summaries,
    Operation.DESCRIBE_TRUSTED_ADVISOR_CHECKS: describe_trusted_advisor_checks,
    Operation.REFRESH_TRUSTED_ADVISOR_CHECK: refresh_trusted_advisor_check,
    Operation.RESOLVE_CASE: resolve_case,
}
