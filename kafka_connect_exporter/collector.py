"""
Prometheus collector for Kafka Connect.

Each scrape lists the connectors, fetches every connector's status one
after another and turns the result into gauges:

    kafka_connect_up
    kafka_connect_connectors_count
    kafka_connect_connector_state_running{connector, state, worker}
    kafka_connect_connector_tasks_state{connector, state, worker_id, id}

If the listing fails only ``kafka_connect_up 0`` is exported. A connector
whose status can't be fetched is left out of the output and the rest of
the scrape carries on.
"""

import threading
from collections.abc import Iterator

from prometheus_client import Gauge
from prometheus_client.core import GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from .client import KafkaConnectClient, KafkaConnectError
from .const import NAMESPACE
from .logging import get_logger
from .models import ScrapeResult

logger = get_logger("collector")

CONNECTOR_RUNNING_NAME = f"{NAMESPACE}_connector_state_running"
CONNECTOR_RUNNING_HELP = "is the connector running?"
CONNECTOR_RUNNING_LABELS = ["connector", "state", "worker"]

TASKS_STATE_NAME = f"{NAMESPACE}_connector_tasks_state"
TASKS_STATE_HELP = "the state of tasks. 0-failed, 1-running, 2-unassigned, 3-paused"
TASKS_STATE_LABELS = ["connector", "state", "worker_id", "id"]


class KafkaConnectCollector(Collector):
    """Collects connector and task state from a Kafka Connect cluster on every scrape."""

    def __init__(self, client: KafkaConnectClient):
        self.client = client
        self._lock = threading.Lock()
        logger.info(f"Collecting data from: {client.base_uri}")

        # Not registered anywhere: exported through collect()
        self._up = Gauge(
            "up",
            "was the last scrape of kafka connect successful?",
            namespace=NAMESPACE,
            registry=None,
        )
        self._connectors_count = Gauge(
            "count",
            "number of deployed connectors",
            namespace=NAMESPACE,
            subsystem="connectors",
            registry=None,
        )

    def scrape(self) -> ScrapeResult:
        """
        Run one collection cycle against the REST API.

        Returns:
            ScrapeResult with up=False and no connectors if the listing
            failed, otherwise every connector whose status could be decoded
        """
        result = ScrapeResult()

        try:
            names = self.client.list_connectors()
        except KafkaConnectError as e:
            logger.error(f"Can't scrape kafka connect: {e}")
            return result

        result.up = True
        result.connector_count = len(names)

        for name in names:
            try:
                status = self.client.connector_status(name)
            except KafkaConnectError as e:
                logger.error(f"Can't get /status for {name}: {e}")
                continue
            result.connectors.append(status)

        logger.debug(
            f"Scraped {len(result.connectors)}/{result.connector_count} connectors, "
            f"{result.task_count} tasks"
        )
        return result

    def describe(self) -> Iterator[Metric]:
        yield from self._up.describe()
        yield from self._connectors_count.describe()
        yield GaugeMetricFamily(CONNECTOR_RUNNING_NAME, CONNECTOR_RUNNING_HELP, labels=CONNECTOR_RUNNING_LABELS)
        yield GaugeMetricFamily(TASKS_STATE_NAME, TASKS_STATE_HELP, labels=TASKS_STATE_LABELS)

    def collect(self) -> Iterator[Metric]:
        result = self.scrape()

        # Overlapping scrapes share the gauges: set and snapshot together
        with self._lock:
            self._up.set(1 if result.up else 0)
            up = self._up.collect()
            if result.up:
                self._connectors_count.set(result.connector_count)
                connectors_count = self._connectors_count.collect()

        yield from up
        if not result.up:
            return
        yield from connectors_count

        connector_running = GaugeMetricFamily(
            CONNECTOR_RUNNING_NAME, CONNECTOR_RUNNING_HELP, labels=CONNECTOR_RUNNING_LABELS
        )
        tasks_state = GaugeMetricFamily(TASKS_STATE_NAME, TASKS_STATE_HELP, labels=TASKS_STATE_LABELS)

        for status in result.connectors:
            connector_running.add_metric(
                [status.name, status.state.lower(), status.worker_id],
                1 if status.running else 0,
            )
            for task in status.tasks:
                tasks_state.add_metric(
                    [status.name, task.state.lower(), task.worker_id, str(task.task_id)],
                    int(task.code),
                )

        if connector_running.samples:
            yield connector_running
        if tasks_state.samples:
            yield tasks_state
