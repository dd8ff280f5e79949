"""
HTTP service for the blueprint generator.
  POST /api/plan    {"details": "..."} → {"plan": {...}}  (422 on validation failure)
  GET  /api/stages  → {"stages": [...]}
  GET  /api/sample  → {"details": "<sample scene description>"}
  GET  /health      → {"ok": true, "service": "vfx-blueprint"}
One request at a time; the serve loop checks for shutdown between requests.
Each connection gets a socket timeout, so a stalled client cannot hold the loop.
"""
import json
import logging
import time
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

from .interpretation import ValidationError
from .pipeline import generate_plan
from .stages import SAMPLE_DETAILS, STAGE_TITLES
from .workflow_utils import log_structured, request_shutdown

logger = logging.getLogger(__name__)

SERVICE_NAME = "vfx-blueprint"
MAX_BODY_BYTES = 64 * 1024
POLL_INTERVAL_SECONDS = 0.5
REQUEST_TIMEOUT_SECONDS = 10.0


class BlueprintHandler(BaseHTTPRequestHandler):
    # Set on the server instance by make_server
    server: "BlueprintServer"
    timeout = REQUEST_TIMEOUT_SECONDS

    def setup(self) -> None:
        # StreamRequestHandler.setup applies self.timeout to the connection socket
        self.timeout = self.server.request_timeout
        super().setup()

    def _send_json(self, status: int, payload: dict[str, Any]) -> None:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._send_json(200, {"ok": True, "service": SERVICE_NAME})
        elif self.path == "/api/stages":
            self._send_json(200, {"stages": list(STAGE_TITLES)})
        elif self.path == "/api/sample":
            self._send_json(200, {"details": SAMPLE_DETAILS})
        else:
            self._send_json(404, {"error": f"Not found: {self.path}"})

    def do_POST(self) -> None:
        if self.path != "/api/plan":
            self._send_json(404, {"error": f"Not found: {self.path}"})
            return
        details = self._read_details()
        if details is None:
            return
        started = time.perf_counter()
        try:
            plan = generate_plan(details, config=self.server.config)
        except ValidationError as e:
            log_structured("warning", event="plan_rejected", chars=len(details.strip()))
            self._send_json(422, {"error": e.message})
            return
        except Exception:
            logger.exception("Plan generation failed")
            self._send_json(500, {"error": "Unexpected error. पुन्हा प्रयत्न करा."})
            return
        log_structured(
            "info",
            event="plan_generated",
            mood=plan.traits.mood,
            time_of_day=plan.traits.time_of_day,
            effects=len(plan.traits.effects),
            ms=round((time.perf_counter() - started) * 1000, 2),
        )
        self._send_json(200, {"plan": plan.to_dict()})

    def _read_details(self) -> str | None:
        """Parse {"details": str} from the request body; sends 400/408/413 and returns None on bad input."""
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = -1
        if length < 0:
            self._send_json(400, {"error": "Invalid Content-Length"})
            return None
        if length > MAX_BODY_BYTES:
            self._send_json(413, {"error": f"Body exceeds {MAX_BODY_BYTES} bytes"})
            return None
        try:
            raw = self.rfile.read(length) if length else b""
        except TimeoutError:
            log_structured("warning", event="body_timeout", expected_bytes=length)
            self.close_connection = True
            self._send_json(408, {"error": f"Request body not received within {self.timeout:g}s"})
            return None
        if len(raw) < length:
            # Client closed before sending the declared body
            self._send_json(400, {"error": f"Body shorter than Content-Length ({len(raw)} < {length})"})
            return None
        try:
            data = json.loads(raw.decode("utf-8") or "{}")
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            self._send_json(400, {"error": f"Invalid JSON body: {e}"})
            return None
        details = data.get("details") if isinstance(data, dict) else None
        if not isinstance(details, str):
            self._send_json(400, {"error": 'Body must be {"details": "<scene description>"}'})
            return None
        return details

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


class BlueprintServer(HTTPServer):
    def __init__(self, address: tuple[str, int], config: dict[str, Any] | None = None):
        super().__init__(address, BlueprintHandler)
        self.config = config or {}
        self.timeout = POLL_INTERVAL_SECONDS
        server_cfg = self.config.get("server") or {}
        self.request_timeout = float(server_cfg.get("request_timeout") or REQUEST_TIMEOUT_SECONDS)


def make_server(host: str, port: int, config: dict[str, Any] | None = None) -> BlueprintServer:
    """Bind the server; port 0 picks a free port (see server.server_address)."""
    return BlueprintServer((host, port), config=config)


def serve(server: BlueprintServer) -> None:
    """Handle requests until shutdown is requested (SIGTERM/SIGINT via setup_graceful_shutdown)."""
    host, port = server.server_address[:2]
    logger.info("Serving %s on http://%s:%s", SERVICE_NAME, host, port)
    try:
        while not request_shutdown():
            server.handle_request()
    finally:
        server.server_close()
        logger.info("Server stopped")
