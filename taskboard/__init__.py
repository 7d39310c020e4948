"""TaskBoard - a minimal in-memory task tracking service."""

__version__ = "0.1.0"
__author__ = "TaskBoard Team"
__description__ = "A minimal in-memory task tracking service"

__all__ = [
    "__version__",
    "__author__",
    "__description__",
]

# Load environment variables as early as possible
import os
from pathlib import Path

from dotenv import load_dotenv


def load_env_file_early() -> None:
    """Load environment variables from the project's .env file at import time.

    Existing environment variables take precedence (override=False). Set
    TASKBOARD_DEBUG=true to print what was loaded.
    """
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if not env_file.exists():
        if os.getenv("TASKBOARD_DEBUG", "false").lower() == "true":
            print(f"No .env file found at {env_file}")
        return

    load_dotenv(env_file, override=False)
    if os.getenv("TASKBOARD_DEBUG", "false").lower() == "true":
        print(f"Environment variables loaded from {env_file}")


load_env_file_early()
