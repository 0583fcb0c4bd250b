"""Pytest configuration for ntt_fps tests."""

import sys
from pathlib import Path

# Add the repository root to the path so ntt_fps imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
