"""Application-wide constants."""

from importlib import metadata

APP_NAME = "SwipeSaver"
DISTRIBUTION_NAME = "swipe-saver"

# URLs
PRIVACY_POLICY_URL = "https://yourapp.com/privacy"
TERMS_OF_USE_URL = "https://yourapp.com/terms"

# Environment
LOG_LEVEL_ENV = "SWIPESAVER_LOG_LEVEL"


def app_version() -> str:
    """Get the installed version, or "1.0" when running from a checkout."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "1.0"
