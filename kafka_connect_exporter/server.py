"""
HTTP exposition server.

Serves the Kafka Connect collector from its own registry on the telemetry
path and redirects every other path there.
"""

import socket
from wsgiref.simple_server import WSGIRequestHandler, make_server

from prometheus_client import CollectorRegistry, make_wsgi_app
from prometheus_client.exposition import ThreadingWSGIServer

from .client import KafkaConnectClient
from .collector import KafkaConnectCollector
from .config import ExporterConfig
from .logging import get_logger

logger = get_logger("server")


class _IPv6Server(ThreadingWSGIServer):
    address_family = socket.AF_INET6


class _LoggingRequestHandler(WSGIRequestHandler):
    """Send access logs to the package logger instead of stderr."""

    def log_message(self, format, *args):
        logger.debug(f"{self.address_string()} - {format % args}")


def build_registry(collector: KafkaConnectCollector) -> CollectorRegistry:
    """
    Create a registry holding only the Kafka Connect collector.

    Process, platform and GC collectors from the default registry are left
    out on purpose.
    """
    registry = CollectorRegistry()
    registry.register(collector)
    return registry


def create_app(registry: CollectorRegistry, telemetry_path: str):
    """Create the WSGI app: metrics on telemetry_path, 301 to it everywhere else."""
    metrics_app = make_wsgi_app(registry)

    def app(environ, start_response):
        if environ.get("PATH_INFO", "/") == telemetry_path:
            return metrics_app(environ, start_response)

        start_response(
            "301 Moved Permanently",
            [("Location", telemetry_path), ("Content-Type", "text/html; charset=utf-8")],
        )
        return [f'<a href="{telemetry_path}">Moved Permanently</a>.\n'.encode()]

    return app


def serve(config: ExporterConfig) -> None:
    """
    Start the exporter and block until interrupted.

    Args:
        config: Validated exporter config
    """
    client = KafkaConnectClient(config.scrape_uri, timeout=config.timeout)
    collector = KafkaConnectCollector(client)
    app = create_app(build_registry(collector), config.telemetry_path)

    httpd = make_server(
        config.listen_host,
        config.listen_port,
        app,
        server_class=_IPv6Server if ":" in config.listen_host else ThreadingWSGIServer,
        handler_class=_LoggingRequestHandler,
    )
    logger.info(f"Listening on {config.listen_address}, metrics at {config.telemetry_path}")

    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()
        client.close()
