from __future__ import annotations

import sys
from pathlib import Path

# --- make project root importable even if CWD is different ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userbase.seeders.runner import main  # noqa: E402

if __name__ == "__main__":
    main()
