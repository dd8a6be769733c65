"""Unit tests for lineage event classification."""

import json

import pytest

from lineage_capture.classification import (
    OPERATION_ALLOW_LIST,
    Rejected,
    Relevant,
    classify_event,
    extract_operation_class,
    is_relevant,
    parse_event,
)
from lineage_capture.errors import InputError


class TestParseEvent:
    """Test body parsing."""

    def test_empty_body(self):
        with pytest.raises(InputError, match="empty"):
            parse_event("")

    def test_empty_bytes(self):
        with pytest.raises(InputError, match="empty"):
            parse_event(b"")

    @pytest.mark.parametrize(
        "body",
        [
            "{",
            "not json",
            "   ",
            "{'a': 1}",
            b"\x80abc",
            "[" * 200000 + "]" * 200000,
        ],
    )
    def test_invalid_json(self, body):
        with pytest.raises(InputError, match="Invalid JSON"):
            parse_event(body)

    def test_invalid_json_status(self):
        with pytest.raises(InputError) as exc_info:
            parse_event("{")
        assert exc_info.value.status_code == 400

    def test_bytes_body(self):
        assert parse_event(b'{"eventType": "COMPLETE"}') == {"eventType": "COMPLETE"}


class TestExtractOperationClass:
    """Test operation class extraction from the logical plan facet."""

    def test_logical_plan_facet(self, event_factory):
        event = event_factory(operation_class="x.Y")
        assert extract_operation_class(event) == "x.Y"

    def test_spark_logical_plan_facet(self, spark_event_dict):
        assert (
            extract_operation_class(spark_event_dict)
            == "org.apache.spark.sql.catalyst.plans.logical.MergeIntoTable"
        )

    def test_missing_facets_logged(self, event_factory, caplog):
        event = event_factory(operation_class=None)
        assert extract_operation_class(event) is None
        assert "Could not extract class name" in caplog.text

    @pytest.mark.parametrize(
        "facets",
        [
            {"logicalPlan": {"plan": []}},
            {"logicalPlan": {"plan": [{}]}},
            {"logicalPlan": {"plan": [{"@class": None}]}},
            {"logicalPlan": {"plan": "CreateTable"}},
            {"logicalPlan": None},
            "not-an-object",
        ],
    )
    def test_malformed_plan_is_absent(self, facets):
        event = {"run": {"runId": "r1", "facets": facets}}
        assert extract_operation_class(event) is None

    def test_unusable_spark_facet_falls_back(self):
        """A spark.logicalPlan facet without a class does not hide logicalPlan."""
        facets = {
            "spark.logicalPlan": {"plan": []},
            "logicalPlan": {"plan": [{"@class": "x.Y"}]},
        }
        event = {"run": {"runId": "r1", "facets": facets}}
        assert extract_operation_class(event) == "x.Y"


class TestIsRelevant:
    """Test the relevance predicate."""

    @pytest.mark.parametrize("operation_class", OPERATION_ALLOW_LIST)
    def test_every_allow_listed_class(self, operation_class):
        assert is_relevant("COMPLETE", operation_class) is True

    @pytest.mark.parametrize("event_type", ["START", "RUNNING", "FAIL", "ABORT", "complete", None])
    def test_other_event_types(self, event_type):
        assert is_relevant(event_type, OPERATION_ALLOW_LIST[0]) is False

    @pytest.mark.parametrize(
        "operation_class",
        [
            None,
            "",
            "CreateTable",
            "org.apache.spark.sql.execution.datasources.createtable",
            "org.apache.spark.sql.execution.datasources.CreateTableCommand",
            " org.apache.spark.sql.execution.datasources.CreateTable",
        ],
    )
    def test_exact_match_only(self, operation_class):
        assert is_relevant("COMPLETE", operation_class) is False


class TestClassifyEvent:
    """Test classify_event end to end."""

    def test_relevant(self, complete_event_body):
        decision = classify_event(complete_event_body)

        assert decision == Relevant(
            run_id="r1",
            job_name="etl_job.py",
            operation_class="org.apache.spark.sql.execution.datasources.CreateTable",
            event_type="COMPLETE",
        )

    def test_start_event_rejected(self, start_event_body):
        decision = classify_event(start_event_body)

        assert isinstance(decision, Rejected)
        assert decision.event_type == "START"
        assert decision.run_id == "r1"

    def test_unknown_class_rejected(self, event_factory):
        body = json.dumps(event_factory(operation_class="org.example.Select"))
        decision = classify_event(body)

        assert isinstance(decision, Rejected)
        assert decision.operation_class == "org.example.Select"

    def test_missing_class_rejected(self, event_factory):
        body = json.dumps(event_factory(operation_class=None))
        assert isinstance(classify_event(body), Rejected)

    def test_query_override_takes_precedence(self, start_event_body, complete_event_body):
        assert isinstance(classify_event(start_event_body, event_type="COMPLETE"), Relevant)
        assert isinstance(classify_event(complete_event_body, event_type="START"), Rejected)

    def test_empty_override_falls_back_to_payload(self, complete_event_body):
        assert isinstance(classify_event(complete_event_body, event_type=""), Relevant)

    def test_override_when_payload_has_no_event_type(self, event_factory):
        body = json.dumps(event_factory(event_type=None))
        assert isinstance(classify_event(body), Rejected)
        assert isinstance(classify_event(body, event_type="COMPLETE"), Relevant)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"run_id": None},
            {"run_id": ""},
            {"job_name": None},
            {"job_name": ""},
            {"run_id": None, "event_type": "START"},
            {"job_name": None, "operation_class": None},
        ],
    )
    def test_missing_required_fields(self, event_factory, overrides):
        """Missing identifiers fail regardless of event type or class."""
        body = json.dumps(event_factory(**overrides))
        with pytest.raises(InputError, match="Missing required fields"):
            classify_event(body)

    @pytest.mark.parametrize("body", ["[]", "42", '"COMPLETE"', "null", '{"run": []}'])
    def test_non_object_payload_is_missing_fields(self, body):
        with pytest.raises(InputError, match="Missing required fields"):
            classify_event(body)

    def test_spark_event(self, spark_event_dict):
        decision = classify_event(json.dumps(spark_event_dict))

        assert isinstance(decision, Relevant)
        assert decision.job_name == "sales_daily.merge_orders"
