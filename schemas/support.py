from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel


class Operation(str, Enum):
    """Closed catalog of AWS Support API operations."""

    ADD_ATTACHMENTS_TO_SET = "add_attachments_to_set"
    ADD_COMMUNICATION_TO_CASE = "add_communication_to_case"
    CREATE_CASE = "create_case"
    DESCRIBE_ATTACHMENT = "describe_attachment"
    DESCRIBE_CASES = "describe_cases"
    DESCRIBE_COMMUNICATIONS = "describe_communications"
    DESCRIBE_SERVICES = "describe_services"
    DESCRIBE_SEVERITY_LEVELS = "describe_severity_levels"
    DESCRIBE_TRUSTED_ADVISOR_CHECK_REFRESH_STATUSES = "describe_trusted_advisor_check_refresh_statuses"
    DESCRIBE_TRUSTED_ADVISOR_CHECK_RESULT = "describe_trusted_advisor_check_result"
    DESCRIBE_TRUSTED_ADVISOR_CHECK_SUMMARIES = "describe_trusted_advisor_check_summaries"
    DESCRIBE_TRUSTED_ADVISOR_CHECKS = "describe_trusted_advisor_checks"
    REFRESH_TRUSTED_ADVISOR_CHECK = "refresh_trusted_advisor_check"
    RESOLVE_CASE = "resolve_case"


class Attachment(BaseModel):
    """File added to an attachment set. ``data`` bytes are base64-encoded on the wire."""
    data: Union[str, bytes]
    file_name: Optional[str] = None


class CreateCaseOptions(BaseModel):
    attachment_set_id: Optional[str] = None
    category_code: Optional[str] = None
    cc_email_addresses: Optional[list[str]] = None
    issue_type: Optional[str] = None
    language: Optional[str] = None
    service_code: Optional[str] = None
    severity_code: Optional[str] = None


class DescribeCasesOptions(BaseModel):
    after_time: Optional[str] = None
    before_time: Optional[str] = None
    case_id_list: Optional[list[str]] = None
    display_id: Optional[str] = None
    include_communications: Optional[bool] = None
    include_resolved_cases: Optional[bool] = None
    language: Optional[str] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None


class DescribeCommunicationsOptions(BaseModel):
    after_time: Optional[str] = None
    before_time: Optional[str] = None
    max_results: Optional[int] = None
    next_token: Optional[str] = None
