"""Entrypoint for launching the string art FastAPI server."""
from __future__ import annotations

import argparse
from typing import List, Optional

import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve generated string art patterns over HTTP.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: all).")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on.")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run("stringart.server.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
