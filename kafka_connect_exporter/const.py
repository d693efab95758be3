"""
Application constants and metadata.
"""

APP_NAME = "kafka_connect_exporter"
APP_VERSION = "0.1.0"
APP_URL = "https://github.com/wakeful/kafka_connect_exporter"

# Metric namespace
NAMESPACE = "kafka_connect"

# Default values
DEFAULT_SCRAPE_URI = "http://127.0.0.1:8080"
DEFAULT_LISTEN_ADDRESS = ":8080"
DEFAULT_TELEMETRY_PATH = "/metrics"
DEFAULT_TIMEOUT = 3.0
DEFAULT_LOG_LEVEL = "info"

SUPPORTED_SCHEMES = ("http", "https")
