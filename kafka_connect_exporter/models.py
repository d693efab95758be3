"""
Data models for Kafka Connect REST payloads.

The ``from_json`` constructors validate the shape of the decoded JSON and
raise ``ValueError`` on any deviation, so callers can treat a malformed
payload the same way as a failed request.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class TaskState(IntEnum):
    """Numeric code exported for a task state."""

    FAILED = 0
    RUNNING = 1
    UNASSIGNED = 2
    PAUSED = 3

    @classmethod
    def from_string(cls, state: str) -> "TaskState":
        """
        Map a free-text task state to its code, case-insensitively.

        Anything that is not running, unassigned or paused (failed,
        restarting, empty, unknown) maps to FAILED.
        """
        match state.lower():
            case "running":
                return cls.RUNNING
            case "unassigned":
                return cls.UNASSIGNED
            case "paused":
                return cls.PAUSED
            case _:
                return cls.FAILED


def is_running(state: str) -> bool:
    """Check if a connector state string means running."""
    return state.lower() == "running"


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"expected string field {key!r}, got {value!r}")
    return value


def _require_task_id(value: Any) -> int:
    # JSON numbers may arrive as floats (e.g. 0.0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected numeric task id, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"task id is not integral: {value!r}")
    if value < 0:
        raise ValueError(f"task id is negative: {value!r}")
    return int(value)


@dataclass(frozen=True)
class TaskStatus:
    """Status of a single connector task."""

    task_id: int
    state: str
    worker_id: str

    @property
    def code(self) -> TaskState:
        return TaskState.from_string(self.state)

    @classmethod
    def from_json(cls, data: Any) -> "TaskStatus":
        if not isinstance(data, dict):
            raise ValueError(f"expected task object, got {type(data).__name__}")
        return cls(
            task_id=_require_task_id(data.get("id")),
            state=_require_str(data, "state"),
            worker_id=_require_str(data, "worker_id"),
        )


@dataclass(frozen=True)
class ConnectorStatus:
    """Status of a connector and its tasks, as returned by /connectors/{name}/status."""

    name: str
    state: str
    worker_id: str
    tasks: tuple[TaskStatus, ...] = ()

    @property
    def running(self) -> bool:
        return is_running(self.state)

    @classmethod
    def from_json(cls, data: Any) -> "ConnectorStatus":
        if not isinstance(data, dict):
            raise ValueError(f"expected status object, got {type(data).__name__}")

        connector = data.get("connector")
        if not isinstance(connector, dict):
            raise ValueError(f"expected 'connector' object, got {connector!r}")

        tasks = data.get("tasks", [])
        if not isinstance(tasks, list):
            raise ValueError(f"expected 'tasks' list, got {tasks!r}")

        return cls(
            name=_require_str(data, "name"),
            state=_require_str(connector, "state"),
            worker_id=_require_str(connector, "worker_id"),
            tasks=tuple(TaskStatus.from_json(task) for task in tasks),
        )


@dataclass
class ScrapeResult:
    """Outcome of one collection cycle."""

    up: bool = False
    connector_count: int = 0
    connectors: list[ConnectorStatus] = field(default_factory=list)

    @property
    def task_count(self) -> int:
        return sum(len(status.tasks) for status in self.connectors)
