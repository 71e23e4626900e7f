"""Test configuration and fixtures.

Provides:
- Python path setup for imports
"""

import sys
from pathlib import Path

# Add src/ to Python path so the package imports without installation
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))
