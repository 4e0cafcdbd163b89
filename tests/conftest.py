# Ensure repository root is on sys.path for imports like `from simrand import Rng`
import os
import sys

_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
