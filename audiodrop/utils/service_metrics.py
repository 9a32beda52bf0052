"""Service metrics

Simple in-memory counters with Prometheus text export.
"""
import time
import threading
from typing import Dict, Any
from dataclasses import dataclass, field


@dataclass
class ServiceMetrics:
    """Upload service metrics collector"""

    start_time: float = field(default_factory=time.time)

    # Requests
    total_requests: int = 0
    successful_uploads: int = 0
    client_errors: int = 0
    server_errors: int = 0

    # Payload
    total_bytes_received: int = 0
    total_audio_seconds: float = 0.0

    _lock: threading.Lock = field(default_factory=threading.Lock)

    def increment_requests(self) -> None:
        with self._lock:
            self.total_requests += 1

    def record_upload(self, num_bytes: int, audio_seconds: float) -> None:
        """Count a stored upload and its payload size"""
        with self._lock:
            self.successful_uploads += 1
            self.total_bytes_received += num_bytes
            self.total_audio_seconds += audio_seconds

    def increment_client_error(self) -> None:
        with self._lock:
            self.client_errors += 1

    def increment_server_error(self) -> None:
        with self._lock:
            self.server_errors += 1

    @property
    def uptime_seconds(self) -> float:
        return time.time() - self.start_time

    @property
    def failed_requests(self) -> int:
        return self.client_errors + self.server_errors

    def get_stats(self) -> Dict[str, Any]:
        """Snapshot of all counters"""
        with self._lock:
            return {
                "uptime_seconds": self.uptime_seconds,
                "total_requests": self.total_requests,
                "successful_uploads": self.successful_uploads,
                "failed_requests": self.failed_requests,
                "client_errors": self.client_errors,
                "server_errors": self.server_errors,
                "total_bytes_received": self.total_bytes_received,
                "total_audio_seconds": self.total_audio_seconds,
            }

    def to_prometheus(self) -> str:
        """Render in Prometheus text exposition format"""
        stats = self.get_stats()
        lines = [
            "# HELP audiodrop_uptime_seconds Service uptime in seconds",
            "# TYPE audiodrop_uptime_seconds gauge",
            f"audiodrop_uptime_seconds {stats['uptime_seconds']:.2f}",
            "",
            "# HELP audiodrop_requests_total Total number of upload requests",
            "# TYPE audiodrop_requests_total counter",
            f"audiodrop_requests_total {stats['total_requests']}",
            "",
            "# HELP audiodrop_uploads_successful_total Uploads stored on disk",
            "# TYPE audiodrop_uploads_successful_total counter",
            f"audiodrop_uploads_successful_total {stats['successful_uploads']}",
            "",
            "# HELP audiodrop_client_errors_total Uploads rejected with a 4xx status",
            "# TYPE audiodrop_client_errors_total counter",
            f"audiodrop_client_errors_total {stats['client_errors']}",
            "",
            "# HELP audiodrop_server_errors_total Uploads failed with a 5xx status",
            "# TYPE audiodrop_server_errors_total counter",
            f"audiodrop_server_errors_total {stats['server_errors']}",
            "",
            "# HELP audiodrop_bytes_received_total Payload bytes stored",
            "# TYPE audiodrop_bytes_received_total counter",
            f"audiodrop_bytes_received_total {stats['total_bytes_received']}",
            "",
            "# HELP audiodrop_audio_seconds_total Audio stored in seconds",
            "# TYPE audiodrop_audio_seconds_total counter",
            f"audiodrop_audio_seconds_total {stats['total_audio_seconds']:.2f}",
        ]
        return "\n".join(lines)

    def reset(self) -> None:
        """Zero all counters (start time is kept)"""
        with self._lock:
            self.total_requests = 0
            self.successful_uploads = 0
            self.client_errors = 0
            self.server_errors = 0
            self.total_bytes_received = 0
            self.total_audio_seconds = 0.0


metrics = ServiceMetrics()
