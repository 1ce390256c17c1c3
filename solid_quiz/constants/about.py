"""Static metadata describing the SOLID quiz service."""

APP_NAME = "SOLID Quiz"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "Quiz backend for the SOLID principles articles. It keeps the quiz answer keys "
    "in sync with the built-in catalog and stores reader progress between runs."
)
