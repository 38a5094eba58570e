# DEPENDENCIES
import sys
import time
import json
import logging
import threading
import traceback
from typing import Any
from typing import Dict
from typing import Tuple
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime

from config.settings import settings


APP_LOGGER_NAME = "legal_analyzer"

# (logger name suffix, log file suffix, fixed level); None means settings.LOG_LEVEL
LOG_STREAMS     = (("",             "",             None),
                   (".error",       "_error",       logging.ERROR),
                   (".performance", "_performance", logging.INFO),
                  )


class DocumentAnalyzerLogger:
    """
    Structured JSON logging for the analysis pipeline

    Three streams share one directory: the main application log, an error log carrying tracebacks
    and a performance log fed by the `log_execution_time` decorator. Loggers are created on first
    use so that importing the package never touches the filesystem
    """
    _loggers : Dict[str, logging.Logger] = dict()
    _log_dir : Optional[Path]            = None
    _lock    : threading.Lock            = threading.Lock()


    @classmethod
    def setup(cls, log_dir: Optional[str] = None, app_name: str = APP_LOGGER_NAME):
        """
        Create the three loggers, replacing any handlers left from a previous setup

        Arguments:
        ----------
            log_dir  { str } : Directory for log files (defaults to settings.LOG_DIR)

            app_name { str } : Logger name prefix and log file stem
        """
        cls._log_dir = Path(log_dir or settings.LOG_DIR)
        cls._log_dir.mkdir(parents = True, exist_ok = True)

        loggers      = dict()

        for name_suffix, file_suffix, fixed_level in LOG_STREAMS:
            logger               = cls._create_logger(name     = f"{app_name}{name_suffix}",
                                                      log_file = cls._log_dir / f"{app_name}{file_suffix}.log",
                                                      level    = fixed_level or cls._configured_level(),
                                                     )
            loggers[logger.name] = logger

        # Published in one assignment: get_logger() never sees a partially built registry
        cls._loggers = {**cls._loggers, **loggers}


    @staticmethod
    def _configured_level() -> int:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())

        return level if isinstance(level, int) else logging.INFO


    @classmethod
    def _create_logger(cls, name: str, log_file: Path, level: int) -> logging.Logger:
        logger           = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        formatter        = logging.Formatter(settings.LOG_FORMAT, datefmt = '%Y-%m-%d %H:%M:%S')

        file_handler     = logging.FileHandler(log_file, encoding = "utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

        # Warnings and errors are echoed to the console
        console_handler  = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger


    @classmethod
    def get_logger(cls, name: str = APP_LOGGER_NAME) -> logging.Logger:
        """
        Logger by name, setting up the streams on first use
        """
        if not cls._loggers:
            # Stage and batch worker threads may race here
            with cls._lock:
                if not cls._loggers:
                    cls.setup()

        return cls._loggers.get(name, logging.getLogger(name))


    @staticmethod
    def _record(**fields) -> str:
        record = {"timestamp" : datetime.now().isoformat(),
                  "thread"    : threading.current_thread().name,
                  **fields
                 }

        return json.dumps(record, default = str)


    @classmethod
    def log_structured(cls, level: int, message: str, /, **kwargs):
        """
        Log one JSON object on the main logger

        Arguments:
        ----------
            level   { int } : Log level

            message { str } : Event description

            **kwargs        : Counts, lengths and identifiers (never document text)
        """
        cls.get_logger().log(level, cls._record(message = message, **kwargs))


    @classmethod
    def log_error(cls, error: Exception, context: Optional[Dict[str, Any]] = None):
        """
        Log an exception with its traceback and the operation context on the error logger
        """
        error_logger = cls.get_logger(f"{APP_LOGGER_NAME}.error")
        details      = error.to_dict().get("details") if hasattr(error, "to_dict") else None

        error_logger.error(cls._record(error_type    = type(error).__name__,
                                       error_message = str(error),
                                       details       = details or {},
                                       traceback     = traceback.format_exc(),
                                       context       = context or {},
                                      ))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Record one timed operation on the performance logger
        """
        perf_logger = cls.get_logger(f"{APP_LOGGER_NAME}.performance")

        perf_logger.info(cls._record(operation        = operation,
                                     duration_seconds = round(duration, 4),
                                     **metrics
                                    ))


    @staticmethod
    def log_execution_time(operation_name: Optional[str] = None):
        """
        Decorator recording duration and outcome of a call; exceptions are re-raised unchanged
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.perf_counter()

                try:
                    result = func(*args, **kwargs)

                except Exception as e:
                    DocumentAnalyzerLogger.log_performance(operation = op_name,
                                                           duration  = time.perf_counter() - start_time,
                                                           status    = "error",
                                                           error     = type(e).__name__,
                                                          )
                    raise

                DocumentAnalyzerLogger.log_performance(operation = op_name,
                                                       duration  = time.perf_counter() - start_time,
                                                       status    = "success",
                                                      )

                return result

            return wrapper

        return decorator


    @classmethod
    def log_files(cls) -> Tuple[Path, ...]:
        """
        Paths of the three log files under the current log directory
        """
        log_dir = cls._log_dir or Path(settings.LOG_DIR)

        return tuple(log_dir / f"{APP_LOGGER_NAME}{file_suffix}.log" for _, file_suffix, _ in LOG_STREAMS)



# Convenience functions
def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    return DocumentAnalyzerLogger.get_logger(name)


def log_info(message: str, **kwargs):
    DocumentAnalyzerLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    DocumentAnalyzerLogger.log_structured(logging.WARNING, message, **kwargs)


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    DocumentAnalyzerLogger.log_error(error, context)


def log_debug(message: str, **kwargs):
    DocumentAnalyzerLogger.log_structured(logging.DEBUG, message, **kwargs)
