#!/usr/bin/env python3
"""
Start the admin console with uvicorn for local development.
"""
import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).parent / "careers_admin_app"


def build_environment():
    env = os.environ.copy()
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{APP_DIR}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = str(APP_DIR)
    env.setdefault("ENVIRONMENT", "development")
    return env


def main():
    parser = argparse.ArgumentParser(description="Run the Careers Admin Console")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    if not (APP_DIR / "backend" / "main.py").exists():
        logger.error("backend/main.py not found under %s", APP_DIR)
        sys.exit(1)

    command = [sys.executable, "-m", "uvicorn", "backend.main:app", "--host", args.host, "--port", str(args.port)]
    if args.reload:
        command.append("--reload")

    logger.info("Starting admin console on http://%s:%s", args.host, args.port)
    try:
        subprocess.run(command, cwd=APP_DIR, env=build_environment(), check=True)
    except subprocess.CalledProcessError as e:
        logger.error("Server exited with code %s", e.returncode)
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
