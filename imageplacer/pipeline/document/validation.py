"""Document validation — sanity checks on a raw snapshot dict."""

from __future__ import annotations


def validate_document(data: dict) -> list[str]:
    """Validate a snapshot dict. Returns error messages (empty = valid)."""
    errors: list[str] = []
    seen_ids: set[int] = set()

    def _walk(nodes: list, path: str) -> None:
        for i, n in enumerate(nodes):
            where = f"{path}[{i}]"
            if not isinstance(n, dict):
                errors.append(f"{where}: expected an object")
                continue
            nid = n.get("id")
            if not isinstance(nid, int) or isinstance(nid, bool):
                errors.append(f"{where}: 'id' must be an integer")
            elif nid in seen_ids:
                errors.append(f"{where}: duplicate id {nid}")
            else:
                seen_ids.add(nid)

            # ── Geometry ──
            for key in ("width", "height"):
                val = n.get(key)
                if not isinstance(val, (int, float)) or isinstance(val, bool):
                    errors.append(f"{where}: '{key}' must be a number")
                elif val < 0:
                    errors.append(f"{where}: '{key}' must be >= 0")
            for key in ("x", "y"):
                val = n.get(key, 0)
                if not isinstance(val, (int, float)) or isinstance(val, bool):
                    errors.append(f"{where}: '{key}' must be a number")

            # ── Fills ──
            fills = n.get("fills", [])
            if fills is not None and fills != "mixed":
                if not isinstance(fills, list):
                    errors.append(f"{where}: 'fills' must be a list or \"mixed\"")
                else:
                    for j, p in enumerate(fills):
                        if not isinstance(p, dict) or "type" not in p:
                            errors.append(f"{where}.fills[{j}]: paint needs a 'type'")

            children = n.get("children", [])
            if not isinstance(children, list):
                errors.append(f"{where}: 'children' must be a list")
            else:
                _walk(children, f"{where}.children")

    roots = data.get("children", [])
    if not isinstance(roots, list):
        errors.append("'children' must be a list")
    else:
        _walk(roots, "children")

    # ── Viewport ──
    center = data.get("viewport_center")
    if center is not None:
        if not isinstance(center, dict):
            errors.append("viewport_center: expected an object with x and y")
        else:
            for key in ("x", "y"):
                val = center.get(key, 0)
                if not isinstance(val, (int, float)) or isinstance(val, bool):
                    errors.append(f"viewport_center: '{key}' must be a number")

    # ── Selection must reference known nodes ──
    selection = data.get("selection", [])
    if not isinstance(selection, list):
        errors.append("selection: expected a list of node ids")
        return errors
    for sid in selection:
        if not isinstance(sid, int) or sid not in seen_ids:
            errors.append(f"selection: unknown node id {sid}")

    return errors
