#!/usr/bin/env python3
"""
Timezone Registry Validator

Checks that the configured locations are usable before they end up on a
desktop widget as a row of ERRORs.

Usage:
    python -m timebyzones.validate_registry

Exit codes:
    0 = all checks passed
    1 = validation failed (details printed to stdout)
"""

import json
import sys
from typing import Iterable, Mapping
from zoneinfo import ZoneInfo

from timebyzones.registry import DEFAULT_LABELS, TIMEZONES, US_LABELS


def _unresolvable(registry: Mapping[str, str]) -> list[str]:
    """Entries whose identifier the timezone database can't load."""
    bad = []
    for label, timezone_id in registry.items():
        try:
            ZoneInfo(timezone_id)
        except Exception as e:
            bad.append(f"{label} ({timezone_id}): {type(e).__name__}: {e}")
    return bad


def validate(
    registry: Mapping[str, str] = TIMEZONES,
    selections: Mapping[str, Iterable[str]] | None = None,
) -> dict:
    """Validate a registry. Returns {"ok": bool, "checks": [...], "error": str|None}."""
    if selections is None:
        selections = {"default": DEFAULT_LABELS, "us": US_LABELS}
    checks = []

    # Check 1: Something to show
    if not registry:
        return {"ok": False, "checks": checks, "error": "Registry is empty"}
    checks.append(f"not_empty: PASS ({len(registry)} zones)")

    # Check 2: Labels are printable
    blank = [repr(label) for label in registry if not label.strip()]
    if blank:
        return {"ok": False, "checks": checks,
                "error": f"Blank display labels: {', '.join(blank)}"}
    checks.append("labels: PASS")

    # Check 3: Every selection only names registered labels
    missing = [f"{name}:{label}" for name, labels in selections.items()
               for label in labels if label not in registry]
    if missing:
        return {"ok": False, "checks": checks,
                "error": f"Selections reference unknown labels: {', '.join(missing)}"}
    checks.append(f"selections: PASS ({', '.join(selections)})")

    # Check 4: Every identifier resolves
    bad = _unresolvable(registry)
    if bad:
        return {"ok": False, "checks": checks,
                "error": f"Unresolvable timezones: {'; '.join(bad)}"}
    checks.append("timezones_resolve: PASS")

    return {"ok": True, "checks": checks, "error": None}


def main() -> None:
    if len(sys.argv) > 1:
        print("Usage: python -m timebyzones.validate_registry")
        sys.exit(1)

    result = validate()
    print(json.dumps(result, indent=2))
    sys.exit(0 if result["ok"] else 1)


if __name__ == "__main__":
    main()
