#!/usr/bin/env python3
"""
Export the Flying Star API OpenAPI schema to a JSON file.

Usage:
  - From a running API:
      python tools/export_openapi.py --base http://127.0.0.1:8000 --out openapi.json

  - From a local app import (project installed, e.g. `pip install -e .`):
      python tools/export_openapi.py --local --out openapi.json
"""

from __future__ import annotations

import argparse
import json

from pathlib import Path
from urllib.request import Request, urlopen


def fetch_from_base(base: str, timeout: float) -> dict:
    url = base.rstrip("/") + "/openapi.json"
    req = Request(url, headers={"Accept": "application/json"})
    with urlopen(req, timeout=timeout) as resp:  # nosec B310
        return json.loads(resp.read().decode("utf-8"))


def build_local() -> dict:
    from apps.api.main import app

    return app.openapi()


def operation_ids(schema: dict) -> list[str]:
    ids = []
    for methods in schema.get("paths", {}).values():
        for op in methods.values():
            if isinstance(op, dict) and "operationId" in op:
                ids.append(op["operationId"])
    return ids


def main() -> int:
    ap = argparse.ArgumentParser(description="Export the Flying Star OpenAPI schema")
    ap.add_argument("--base", help="Base URL of a running API (e.g. http://127.0.0.1:8000)")
    ap.add_argument("--local", action="store_true", help="Build schema by importing the app")
    ap.add_argument("--out", default="openapi.json", help="Output file path")
    ap.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    args = ap.parse_args()

    if not args.base and not args.local:
        ap.error("Provide --base or --local")

    schema = fetch_from_base(args.base, args.timeout) if args.base else build_local()

    ids = operation_ids(schema)
    if len(ids) != len(set(ids)):
        ap.exit(1, "Duplicate operationId values in schema\n")

    out = Path(args.out)
    out.write_text(json.dumps(schema, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote {out} ({len(schema.get('paths', {}))} paths, {len(ids)} operations)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
