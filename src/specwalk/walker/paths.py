from __future__ import annotations

from specwalk.diagnostics.models import DocumentPath, PathComponent


def path_component(key: object) -> PathComponent:
    """Map a mapping key or sequence index onto a diagnostic path component.

    JSON keys are always strings. YAML may also produce integer keys (status
    codes such as ``200``), which are kept, and boolean keys (YAML 1.1 reads
    an unquoted ``on``/``yes``/``no`` as a boolean), which become ``1``/``0``.
    Both still look up the original entry since ``True == 1`` hash-equally.
    Any other scalar key (null, float, date) is rendered with ``str``; such a
    component names the entry but does not index it.
    """
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, str | int):
        return key
    return str(key)


def child_path(path: DocumentPath, key: object) -> DocumentPath:
    return (*path, path_component(key))
