import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def init_logger(level: str = "INFO", log_dir: str = "", rotation: str = "10 MB", retention: str = "7 days"):
    """Reset loguru sinks: colored stderr output plus an optional rotating file under `log_dir`."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_LOG_FORMAT, colorize=True)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path / "casekit_{time:YYYY-MM-DD}.log"),
            level=level.upper(),
            format=_LOG_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            enqueue=True,
        )
        logger.info(f"log file sink added under {log_path}")
