import logging


def get_logger(name: str = "safeurl") -> logging.Logger:
    """
    Returns a "safeurl" logger, or one of its children.
    """
    if name != "safeurl" and not name.startswith("safeurl."):
        name = f"safeurl.{name}"
    return logging.getLogger(name)
