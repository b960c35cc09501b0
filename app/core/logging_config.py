import logging

from app.core.config import settings


def configure_logging(level: str | int | None = None) -> None:
    """Initializes root logging for an application embedding the domain layer.

    Sends records to the terminal using the format from settings. The domain
    modules only emit DEBUG records, so hosts usually call this with
    ``level="DEBUG"`` when they want to trace name parsing.

    Args:
        level (str | int | None): Overrides ``settings.LOG_LEVEL`` when given.
    """
    logging.basicConfig(
        level=level if level is not None else settings.LOG_LEVEL.upper(),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler()], # This sends it to the Terminal
        force=True
    )
