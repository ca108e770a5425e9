from __future__ import annotations
"""Static file server over a directory.

``GET /<path>`` returns a file's text or an HTML listing for a directory;
``GET /tower/<path>`` serves raw files through Flask's ``send_from_directory``.
"""

import logging
import os
from pathlib import Path
from typing import Tuple, Union

from flask import Flask, send_from_directory
from markupsafe import escape
from werkzeug.security import safe_join

log = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"


def _listing(directory: Path, rel: str) -> str:
    items = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        href = "/" + "/".join(part for part in (rel.strip("/"), entry.name) if part)
        items.append(f'<li><a href="{escape(href)}">{escape(entry.name)}</a></li>')
    return f"<html><body><ul>{''.join(items)}</ul></body></html>"


def create_app(path: Union[str, os.PathLike]) -> Flask:
    root = Path(path).resolve()
    app = Flask(__name__)
    app.config["RCLI_SERVE_ROOT"] = str(root)

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def file_handler(path: str) -> Tuple[str, int]:
        joined = safe_join(str(root), path) if path else str(root)
        if joined is None:
            return f"File {escape(path)} not found", 404
        p = Path(joined)
        log.info("Reading file %s", p)
        if not p.exists():
            return f"File {escape(p)} not found", 404
        if p.is_dir():
            try:
                return _listing(p, path), 200
            except OSError as exc:
                log.warning("Error listing directory: %s", exc)
                return str(escape(exc)), 500
        try:
            content = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Error reading file: %s", exc)
            return str(escape(exc)), 500
        log.info("Read %d bytes", len(content))
        return content, 200

    @app.route("/tower/<path:filename>")
    def tower(filename: str):
        return send_from_directory(root, filename)

    return app


def process_http_serve(path: Union[str, os.PathLike], port: int) -> None:
    app = create_app(path)
    log.info("Serving %s on port %s", path, port)
    app.run(host=DEFAULT_HOST, port=port)
