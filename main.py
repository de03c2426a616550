from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from pathlib import Path

import uvicorn

from draughts_server.config import ServerConfig


def parse_args(defaults: ServerConfig) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the draughts rooms API.")
	parser.add_argument("--host", default=defaults.host, help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=defaults.port, help="Port for the API server.")
	parser.add_argument("--rooms-path", type=Path, default=defaults.rooms_path, help="JSON file rooms are kept in.")
	parser.add_argument("--board-size", type=int, default=defaults.board_size, help="Board size for new rooms.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default=defaults.log_level, help="Log level for the app and uvicorn.")
	return parser.parse_args()


def main() -> None:
	defaults = ServerConfig.from_env()
	args = parse_args(defaults)
	config = replace(
		defaults,
		host=args.host,
		port=args.port,
		rooms_path=args.rooms_path,
		board_size=args.board_size,
		log_level=args.log_level.lower(),
		reload=args.reload,
	)
	logging.basicConfig(
		level=config.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	# The app factory reads its settings from the environment, also under --reload.
	os.environ.update(config.to_env())
	uvicorn.run(
		"draughts_server.app:create_app",
		factory=True,
		host=config.host,
		port=config.port,
		reload=config.reload,
		log_level=config.log_level,
	)


if __name__ == "__main__":
	main()
