"""
Root conftest - shared pytest configuration and fixtures.
Ensures the vision_bridge package is discoverable when running pytest from the repo root.
"""
import sys
from pathlib import Path

# Ensure repo root is in path for 'from vision_bridge...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
