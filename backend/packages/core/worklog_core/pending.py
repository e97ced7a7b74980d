"""
Pending submission decoding.

Clients report their in-flight requests as the raw form fields they
submitted. Only entry creations are relevant to the timeline; each one is
decoded through ``PendingEntry`` and anything that fails validation is
reported back instead of being coerced into a bogus entry.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from worklog_core import get_logger

from .schemas import PendingEntry, RejectedSubmission

logger = get_logger(__name__)

CREATE_ENTRY_INTENT = "createEntry"


class PendingBatch(BaseModel):
    """Decoded pending entries plus the submissions that were rejected."""

    entries: list[PendingEntry] = Field(default_factory=list)
    rejected: list[RejectedSubmission] = Field(default_factory=list)


def decode_pending_entry(fields: Mapping[str, Any]) -> PendingEntry:
    """
    Decode one submitted creation request.

    Args:
        fields: Submitted form fields.

    Returns:
        The pending entry.

    Raises:
        ValidationError: If the fields do not describe a valid entry.
    """
    return PendingEntry.model_validate(dict(fields))


def format_errors(error: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``field: message`` strings."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return messages


def collect_pending_entries(submissions: Iterable[Mapping[str, Any]]) -> PendingBatch:
    """
    Decode every in-flight entry creation.

    Submissions with any other intent (deletions, edits) are skipped.

    Args:
        submissions: Raw form fields of each in-flight request.

    Returns:
        Decoded entries and rejected submissions.
    """
    batch = PendingBatch()
    for fields in submissions:
        if fields.get("intent") != CREATE_ENTRY_INTENT:
            continue
        try:
            batch.entries.append(decode_pending_entry(fields))
        except ValidationError as e:
            submission_id = fields.get("id")
            rejected = RejectedSubmission(
                id=str(submission_id) if submission_id is not None else None,
                errors=format_errors(e),
            )
            batch.rejected.append(rejected)
            logger.warning(
                "Rejected pending entry submission",
                extra={"entry_id": rejected.id, "errors": rejected.errors},
            )
    return batch
