"""
Shared pytest fixtures for lineage capture tests.

Provides reusable lineage event payloads to avoid duplication across test files.
"""

import json
from typing import Optional

import pytest


CREATE_TABLE = "org.apache.spark.sql.execution.datasources.CreateTable"


def make_event(
    event_type: Optional[str] = "COMPLETE",
    run_id: Optional[str] = "r1",
    job_name: Optional[str] = "etl_job.py",
    operation_class: Optional[str] = CREATE_TABLE,
    facet_name: str = "logicalPlan",
) -> dict:
    """Build a lineage event dict, leaving out any field passed as None."""
    run: dict = {}
    if run_id is not None:
        run["runId"] = run_id
    if operation_class is not None:
        run["facets"] = {facet_name: {"plan": [{"@class": operation_class}]}}

    event: dict = {"run": run}
    if event_type is not None:
        event["eventType"] = event_type
    if job_name is not None:
        event["job"] = {"name": job_name}
    return event


# =============================================================================
# Lineage Event Fixtures
# =============================================================================

@pytest.fixture
def complete_event_dict():
    """Relevant event: COMPLETE run of an allow-listed CreateTable."""
    return make_event()


@pytest.fixture
def complete_event_body(complete_event_dict):
    """Relevant event serialized as a request body."""
    return json.dumps(complete_event_dict)


@pytest.fixture
def start_event_body():
    """Same event as complete_event_body but with eventType START."""
    return json.dumps(make_event(event_type="START"))


@pytest.fixture
def spark_event_dict():
    """Event as emitted by the OpenLineage Spark listener."""
    return {
        "eventType": "COMPLETE",
        "eventTime": "2025-03-07T09:05:01.123Z",
        "run": {
            "runId": "0195f1c2-7d3a-7c11-9a4e-2f1f4a0b9c10",
            "facets": {
                "spark.logicalPlan": {
                    "_producer": "https://github.com/OpenLineage/OpenLineage",
                    "plan": [
                        {
                            "@class": "org.apache.spark.sql.catalyst.plans.logical.MergeIntoTable",
                            "num-children": 2,
                        }
                    ],
                }
            },
        },
        "job": {"namespace": "adb-workspace", "name": "sales_daily.merge_orders"},
        "inputs": [],
        "outputs": [],
    }


@pytest.fixture
def event_factory():
    """Factory for lineage event dicts with selected fields overridden or removed."""
    return make_event
