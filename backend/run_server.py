#!/usr/bin/env python
"""
Launcher for the text detection API without the debug reloader.

Host and port come from HOST / PORT; the endpoint listing is read from the
app's URL map so it stays in step with app.py.
"""
import os
import sys
from typing import List

from app import app

HIDDEN_METHODS = {'HEAD', 'OPTIONS'}


def describe_endpoints(flask_app) -> List[str]:
    """One "METHOD /rule" line per routed method, static files excluded."""
    lines = []
    for rule in sorted(flask_app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.endpoint == 'static':
            continue
        for method in sorted(rule.methods - HIDDEN_METHODS):
            lines.append(f"{method:<5}{rule.rule}")
    return lines


def main() -> int:
    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', '5000'))

    print("=" * 70, flush=True)
    print(f"VisioNova Text Detection API on http://{host}:{port}", flush=True)
    for line in describe_endpoints(app):
        print(f"  - {line}", flush=True)
    print("=" * 70, flush=True)

    try:
        app.run(host=host, port=port, debug=False, use_reloader=False, threaded=True)
    except OSError as e:
        print(f"ERROR: could not bind {host}:{port}: {e}", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
