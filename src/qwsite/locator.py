"""Locator - maps logical output paths to template files on disk.

Resolution order for a logical path `P` (relative to the source root):
1. `P.{exts}` for the preferred engine's extensions, when one is given
2. `P.*` accepting only registered engine extensions
3. `P` itself, when `try_static` is set
4. `P` itself as a literal file

Results are memoized in the application's ResolutionCache, so repeated
lookups never touch the filesystem again during a build.
"""

from __future__ import annotations

import glob
import logging
import os
from typing import TYPE_CHECKING, Any

from qwsite.filesystem import expand_braces

if TYPE_CHECKING:
    from qwsite.app import Application

log = logging.getLogger(__name__)


def strip_leading_slash(path: str) -> str:
    return path.lstrip("/")


def resolve_template(
    app: "Application", request_path: str, options: dict[str, Any] | None = None
) -> str | None:
    """Find a template on disk given an output path.

    Args:
        app: Application providing the source root, engines and cache.
        request_path: Logical path, e.g. "/index.html" or "layouts/layout".
        options:
            preferred_engine: engine id (or extension) to try before any other.
            try_static: also accept a file with no engine extension.

    Returns:
        Absolute path of the template, or None when nothing matches.
    """
    request_path = str(request_path)
    opts = dict(options or {})
    return app.cache.fetch(
        "resolve_template",
        request_path,
        opts,
        factory=lambda: _search(app, request_path, opts),
    )


def _search(app: "Application", request_path: str, options: dict[str, Any]) -> str | None:
    fs = app.filesystem
    relative_path = strip_leading_slash(request_path)
    on_disk_path = os.path.abspath(os.path.join(app.source_dir, relative_path))

    # By default, any engine will do
    trials: list[str | None] = ["*"]
    if options.get("try_static"):
        trials.append(None)

    preferred_engine = options.get("preferred_engine")
    if preferred_engine is not None:
        matched_exts = app.engines.extensions_for(str(preferred_engine))
        if matched_exts:
            trials.insert(0, "{" + ",".join(matched_exts) + "}")

    escaped = glob.escape(on_disk_path)
    for trial in trials:
        if trial is None:
            path_with_ext = on_disk_path
            patterns = [escaped]
        else:
            path_with_ext = f"{on_disk_path}.{trial}"
            patterns = [f"{escaped}.{alt}" for alt in expand_braces(trial)]

        found_path = None
        for pattern in patterns:
            found_path = next(
                (p for p in fs.glob(pattern) if app.engines.is_template(p)), None
            )
            if found_path:
                break

        if not found_path and fs.is_file(path_with_ext):
            found_path = path_with_ext

        if found_path:
            log.debug(f"Resolved {request_path} -> {found_path} (trial {trial!r})")
            return found_path

    if fs.is_file(on_disk_path):
        log.debug(f"Resolved {request_path} -> {on_disk_path} (literal)")
        return on_disk_path

    log.debug(f"Could not resolve {request_path}")
    return None


def locate_layout(
    app: "Application", name: str, preferred_engine: str | None = None
) -> str | None:
    """Find a layout on disk, optionally preferring a specific engine.

    Looks in the layouts directory first, then at the source root.
    """
    resolve_opts: dict[str, Any] = {}
    if preferred_engine is not None:
        resolve_opts["preferred_engine"] = preferred_engine

    layout_path = resolve_template(
        app, f"{app.config.layouts_dir}/{name}", resolve_opts
    )
    if not layout_path:
        layout_path = resolve_template(app, str(name), resolve_opts)

    return layout_path
