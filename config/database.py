"""
Database connection configuration, read from the environment.
"""

import os
from typing import Any, Dict


def get_config() -> Dict[str, Any]:
    """Build the `database` configuration section."""
    return {
        "uri": os.getenv("DATABASE_URI", "bolt://localhost:7687"),
        "user": os.getenv("DATABASE_USER", "neo4j"),
        "password": os.getenv("DATABASE_PASSWORD"),
    }
