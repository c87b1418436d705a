"""
Test suite for the Alexya framework.
"""

from typing import Any, Dict


class TestConfig:
    """Test configuration and utilities."""

    @staticmethod
    def mock_settings(log_dir: str) -> Dict[str, Any]:
        """Get mock settings for testing."""
        return {
            "alexya": {
                "locale": "en_US",
                "logging": {
                    "enabled": True,
                    "type": "file",
                    "directory": log_dir,
                    "levels": {"error": True, "warning": True, "info": True, "debug": False},
                },
                "sockswork": {"timeout": 100, "server": "127.0.0.1", "port": 1207},
            },
            "database": {
                "uri": "bolt://localhost:7687",
                "user": "neo4j",
                "password": "password",
            },
        }
