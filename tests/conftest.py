import os, sys
from pathlib import Path

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Keep config deterministic regardless of the developer's environment
os.environ.setdefault("DIRECT_MODE", "0")
os.environ.setdefault("CLEAR_ON_MEMORY_WARNING", "1")
os.environ.setdefault("LOG_LEVEL", "INFO")
