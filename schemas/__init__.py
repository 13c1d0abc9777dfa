from schemas.request import RequestDescriptor
from schemas.support import (
    Attachment,
    CreateCaseOptions,
    DescribeCasesOptions,
    DescribeCommunicationsOptions,
    Operation,
)

__all__ = [
    "RequestDescriptor",
    "Operation",
    "Attachment",
    "CreateCaseOptions",
    "DescribeCasesOptions",
    "DescribeCommunicationsOptions",
]
