import sys
from pathlib import Path
import os

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENV", "dev")
# Background pings would interleave with the frames tests assert on.
os.environ.setdefault("SCOREBOARD_HEARTBEAT_SEC", "0")
os.environ.setdefault("SCOREBOARD_SEND_TIMEOUT_SEC", "2")
