"""Runtime environment classification."""

PRODUCTION = "production"
DEVELOPMENT = "development"

ENVIRONMENTS = (DEVELOPMENT, PRODUCTION)

_ALIASES = {
    "prod": PRODUCTION,
    "production": PRODUCTION,
    "dev": DEVELOPMENT,
    "development": DEVELOPMENT,
}


def classify_environment(mode: str) -> str:
    """
    Normalize a free-form mode string to a runtime environment.

    Unrecognized input, including the empty string, falls back to
    development instead of raising.

    Args:
        mode: Mode string as given on the command line

    Returns:
        str: "production" or "development"
    """
    return _ALIASES.get((mode or "").strip().lower(), DEVELOPMENT)
