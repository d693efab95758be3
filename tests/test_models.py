"""
Tests for REST payload models and state mapping.
"""

import pytest

from kafka_connect_exporter.models import (
    ConnectorStatus,
    ScrapeResult,
    TaskState,
    TaskStatus,
    is_running,
)


@pytest.mark.parametrize("state", ["Running", "RUNNING", "running"])
def test_task_state_running(state: str) -> None:
    assert TaskState.from_string(state) == TaskState.RUNNING == 1


@pytest.mark.parametrize(
    "state,expected",
    [
        ("Unassigned", 2),
        ("UNASSIGNED", 2),
        ("PAUSED", 3),
        ("paused", 3),
    ],
)
def test_task_state_codes(state: str, expected: int) -> None:
    assert TaskState.from_string(state) == expected


@pytest.mark.parametrize("state", ["failed", "FAILED", "", "foo", "RESTARTING", " running"])
def test_task_state_falls_back_to_zero(state: str) -> None:
    assert TaskState.from_string(state) is TaskState.FAILED
    assert int(TaskState.from_string(state)) == 0


@pytest.mark.parametrize("state", ["RUNNING", "Running", "running"])
def test_connector_running(state: str) -> None:
    assert is_running(state) is True


@pytest.mark.parametrize("state", ["PAUSED", "FAILED", "UNASSIGNED", "", "runnin"])
def test_connector_not_running(state: str) -> None:
    assert is_running(state) is False


def test_connector_status_from_json() -> None:
    status = ConnectorStatus.from_json(
        {
            "name": "test-changesets",
            "connector": {"state": "RUNNING", "worker_id": "kafka-connect:8083"},
            "tasks": [
                {"state": "running", "id": 0, "worker_id": "kafka-connect:8083"},
                {"state": "FAILED", "id": 1, "worker_id": "kafka-connect:8084", "trace": "boom"},
            ],
            "type": "sink",
        }
    )

    assert status.name == "test-changesets"
    assert status.state == "RUNNING"
    assert status.worker_id == "kafka-connect:8083"
    assert status.running is True
    assert status.tasks == (
        TaskStatus(task_id=0, state="running", worker_id="kafka-connect:8083"),
        TaskStatus(task_id=1, state="FAILED", worker_id="kafka-connect:8084"),
    )
    assert [task.code for task in status.tasks] == [TaskState.RUNNING, TaskState.FAILED]


def test_connector_status_without_tasks() -> None:
    status = ConnectorStatus.from_json(
        {"name": "idle", "connector": {"state": "PAUSED", "worker_id": "w1"}}
    )

    assert status.tasks == ()
    assert status.running is False


def test_task_id_accepts_integral_float() -> None:
    task = TaskStatus.from_json({"state": "RUNNING", "id": 3.0, "worker_id": "w1"})
    assert task.task_id == 3
    assert isinstance(task.task_id, int)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "test-changesets",
        {"connector": {"state": "RUNNING", "worker_id": "w1"}, "tasks": []},
        {"name": "c1", "tasks": []},
        {"name": "c1", "connector": "RUNNING", "tasks": []},
        {"name": "c1", "connector": {"worker_id": "w1"}, "tasks": []},
        {"name": "c1", "connector": {"state": 1, "worker_id": "w1"}, "tasks": []},
        {"name": "c1", "connector": {"state": "RUNNING", "worker_id": "w1"}, "tasks": {}},
        {"name": "c1", "connector": {"state": "RUNNING", "worker_id": "w1"}, "tasks": [1]},
    ],
)
def test_connector_status_rejects_bad_shape(payload) -> None:
    with pytest.raises(ValueError):
        ConnectorStatus.from_json(payload)


@pytest.mark.parametrize("task_id", [None, "0", True, -1, 1.5])
def test_task_status_rejects_bad_id(task_id) -> None:
    with pytest.raises(ValueError):
        TaskStatus.from_json({"state": "RUNNING", "id": task_id, "worker_id": "w1"})


def test_scrape_result_defaults() -> None:
    result = ScrapeResult()

    assert result.up is False
    assert result.connector_count == 0
    assert result.connectors == []
    assert result.task_count == 0
