"""
Application configuration, read from the environment.
Applications extend this section through the `Settings` binding.
"""

import os
from typing import Any, Dict


def get_config() -> Dict[str, Any]:
    """Build the `application` configuration section."""
    return {
        "name": os.getenv("APP_NAME", "Alexya"),
        "environment": os.getenv("APP_ENV", "production"),
    }
