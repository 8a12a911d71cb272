from __future__ import annotations

import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.rollmate.container import build_container
from src.rollmate.storage.seed import seed_demo_data


def main() -> None:
    """Build a fresh store, seed it and dump the demo rows.

    The store lives in memory, so this is a dry run showing what
    ``AUTO_SEED=1`` loads into the server on startup.
    """
    container = build_container()
    counts = seed_demo_data(container)

    dump = {
        "classes": [c.to_dict() for c in container.class_service.list_classes()],
        "students": [s.to_dict() for s in container.user_service.list_students()],
    }
    print(json.dumps(dump, indent=2))
    print(f"OK: seeded {counts}")


if __name__ == "__main__":
    main()
