# =============================================================================
# Event Classification
# =============================================================================
# Decides whether a lineage event describes a schema- or table-mutating
# operation worth archiving.
# =============================================================================

"""
Relevance decision for OpenLineage run events.

An event is relevant when it reports a completed run whose first logical
plan node is one of the allow-listed Spark operations. Missing optional
fields never fail classification; missing identifiers do.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from lineage_capture.errors import InputError
from lineage_capture.payload import extract_path, extract_text

__all__ = [
    "COMPLETE_EVENT_TYPE",
    "LOGICAL_PLAN_FACETS",
    "OPERATION_ALLOW_LIST",
    "Relevant",
    "Rejected",
    "Classification",
    "parse_event",
    "extract_operation_class",
    "is_relevant",
    "classify_event",
]

logger = logging.getLogger(__name__)

COMPLETE_EVENT_TYPE = "COMPLETE"

# Facet names the logical plan is published under, tried in order
LOGICAL_PLAN_FACETS = ("spark.logicalPlan", "logicalPlan")

OPERATION_ALLOW_LIST = (
    "org.apache.spark.sql.execution.datasources.CreateTable",
    "org.apache.spark.sql.catalyst.plans.logical.CreateViewStatement",
    "org.apache.spark.sql.catalyst.plans.logical.CreateTableAsSelectStatement",
    "org.apache.spark.sql.catalyst.plans.logical.InsertIntoStatement",
    "org.apache.spark.sql.execution.datasources.SaveIntoDataSourceCommand",
    "org.apache.spark.sql.catalyst.plans.logical.MergeIntoTable",
)


@dataclass(frozen=True)
class Relevant:
    """A completed, allow-listed operation that should be archived."""

    run_id: str
    job_name: str
    operation_class: str
    event_type: str


@dataclass(frozen=True)
class Rejected:
    """A well-formed event that is not worth tracking."""

    reason: str
    run_id: str
    job_name: str
    event_type: Optional[str] = None
    operation_class: Optional[str] = None


Classification = Union[Relevant, Rejected]


def parse_event(body: Union[str, bytes]) -> Any:
    """
    Parse a raw request body (text or UTF-8 bytes) as JSON.

    Raises:
        InputError: If the body is empty or not valid JSON
    """
    if not body:
        logger.warning("Empty request body.")
        raise InputError("Request body is empty.")

    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        logger.error(f"Failed to parse JSON: {e}")
        raise InputError("Invalid JSON format.") from e


def extract_operation_class(event: Any) -> Optional[str]:
    """
    Pull the class of the first logical plan node out of an event.

    Walks run -> facets -> logical plan facet -> plan -> [0] -> "@class".
    An absent hop is logged and yields None.
    """
    facets = extract_path(event, "run", "facets")
    found_facet = False
    for facet_name in LOGICAL_PLAN_FACETS:
        plan = extract_path(facets, facet_name, "plan")
        if plan is None:
            continue
        operation_class = extract_text(plan, 0, "@class")
        if operation_class:
            return operation_class
        logger.warning(
            f"Could not extract class name from logical plan facet '{facet_name}'."
        )
        found_facet = True

    if not found_facet:
        logger.warning("Could not extract class name: no logical plan facet present.")
    return None


def is_relevant(event_type: Optional[str], operation_class: Optional[str]) -> bool:
    """Exact, case-sensitive relevance predicate."""
    return (
        event_type == COMPLETE_EVENT_TYPE
        and operation_class is not None
        and operation_class in OPERATION_ALLOW_LIST
    )


def classify_event(
    body: Union[str, bytes], event_type: Optional[str] = None
) -> Classification:
    """
    Classify a raw lineage event.

    Args:
        body: Raw request body
        event_type: Optional event type override (takes precedence over the
            payload's ``eventType`` when non-empty)

    Returns:
        Relevant or Rejected

    Raises:
        InputError: If the body is empty, not JSON, or lacks a run id or job name
    """
    event = parse_event(body)

    resolved_type = event_type or extract_text(event, "eventType")
    run_id = extract_text(event, "run", "runId")
    job_name = extract_text(event, "job", "name")
    operation_class = extract_operation_class(event)

    if not run_id or not job_name:
        logger.error("Missing runId or notebookName.")
        raise InputError("Missing required fields: runId or notebookName.")

    if not is_relevant(resolved_type, operation_class):
        logger.info(
            f"Skipping run {run_id}: eventType={resolved_type!r}, "
            f"className={operation_class!r}"
        )
        return Rejected(
            reason="Event Type is not COMPLETE or ClassName not matched.",
            run_id=run_id,
            job_name=job_name,
            event_type=resolved_type,
            operation_class=operation_class,
        )

    return Relevant(
        run_id=run_id,
        job_name=job_name,
        operation_class=operation_class,
        event_type=resolved_type,
    )
