#!/usr/bin/env python3
"""
Run the blueprint HTTP service until SIGTERM/SIGINT.

Usage:
  python scripts/serve.py
  python scripts/serve.py --port 9000
  BLUEPRINT_HOST=0.0.0.0 BLUEPRINT_PORT=8080 python scripts/serve.py
"""
import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from blueprint.config import get_log_level, load_config
from blueprint.server import make_server, serve
from blueprint.workflow_utils import configure_logging, setup_graceful_shutdown

logger = logging.getLogger(__name__)


def run() -> None:
    parser = argparse.ArgumentParser(description="Serve POST /api/plan (scene description → VFX blueprint).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML")
    parser.add_argument("--host", default=None, help="Bind address (env BLUEPRINT_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (env BLUEPRINT_PORT)")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(get_log_level(config))
    server_cfg = config.get("server", {})
    host = args.host or server_cfg.get("host", "127.0.0.1")
    port = args.port if args.port is not None else int(server_cfg.get("port", 8080))

    setup_graceful_shutdown()
    try:
        server = make_server(host, port, config=config)
    except OSError as e:
        logger.error("Could not bind %s:%s: %s", host, port, e)
        sys.exit(1)
    serve(server)


if __name__ == "__main__":
    run()
