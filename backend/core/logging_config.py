import logging
import os


def setup_logging(log_level: str = "INFO", log_file: str = "logs/app.log") -> None:
    """
    Minimal logging configuration:
    - Logs to terminal
    - Logs to the given file (directory is created if missing)
    """

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    # the SDK logs full request bodies at DEBUG, which would include user text
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("openai").setLevel(max(level, logging.WARNING))
