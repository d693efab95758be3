"""
Prometheus exporter for Kafka Connect connector and task health.
"""

from .const import APP_VERSION as __version__

__all__ = ["__version__"]
