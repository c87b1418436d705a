"""
Filesystem locations used by the framework.
All directories are derived from the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Root dir, overridable for deployments that keep the code elsewhere
ROOT_DIR: Path = Path(os.getenv("ALEXYA_ROOT_DIR") or Path(__file__).resolve().parent.parent)

# Framework core
ALEXYA_DIR: Path = ROOT_DIR / "Alexya"

# Application
APPLICATION_DIR: Path = ROOT_DIR / "Application"
MODELS_DIR: Path = APPLICATION_DIR / "Models"
VIEWS_DIR: Path = APPLICATION_DIR / "Views"
CONTROLLERS_DIR: Path = APPLICATION_DIR / "Controllers"
ROUTES_DIR: Path = APPLICATION_DIR / "Routes"
LOCALES_DIR: Path = APPLICATION_DIR / "Locales"

# Third party libraries and packages
LIB_DIR: Path = ROOT_DIR / "lib"
PACKAGES_DIR: Path = ROOT_DIR / "packages"

TRANSLATIONS_DIR: Path = ROOT_DIR / "translations"
LOGS_DIR: Path = ROOT_DIR / "logs"
UPLOADS_DIR: Path = ROOT_DIR / "uploads"
SESSIONS_DIR: Path = ROOT_DIR / "sessions"
