import logging
import sys

APP_LOGGERS = ("models", "components", "main", "__main__")


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own loggers, let third-party ones through only at ERROR+"""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name in APP_LOGGERS or name.startswith(tuple(n + "." for n in APP_LOGGERS)):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(level: int = logging.INFO) -> None:
    """Configure console logging. Call once, before the first log call."""
    root = logging.getLogger()
    root.setLevel(level)

    # 避免重复 handler
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
