import logging
import sys
from typing import Optional

class DynamicBufferLogger:
    def __init__(self, name: str = "DynamicBuffer", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log(self, level: int, msg: str) -> None:
        self.logger.log(level, msg)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def fuzz_progress(
        self,
        case: int,
        total: int,
        failures: int,
        **kwargs,
    ) -> None:
        msg = f"Case {case}/{total} | Failures: {failures}"
        for k, v in kwargs.items():
            if isinstance(v, float):
                msg += f" | {k}: {v:.4f}"
            else:
                msg += f" | {k}: {v}"
        self.info(msg)


_logger: Optional[DynamicBufferLogger] = None

def get_logger() -> DynamicBufferLogger:
    global _logger
    if _logger is None:
        _logger = DynamicBufferLogger()
    return _logger
