# -*- coding: utf-8 -*-
"""
@File    : logger.py
@Desc    : dictConfig based logging for the content store, the API and the scripts
"""
import sys
import json
import logging
import logging.config
from typing import Optional

from blogstore.core.config import Settings, settings as default_settings


class JSONFormatter(logging.Formatter):
    """
    自定义 JSON 格式化器，适用于生产环境日志收集 (ELK/EFK/Datadog)
    """

    # LogRecord 原有的属性，extra 之外的字段都过滤掉
    skip_keys = {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread", "threadName",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "func_name": record.funcName,
            "line_no": record.lineno,
            "process_id": record.process,
            "thread_name": record.threadName,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # 处理 extra 参数: logger.info("msg", extra={"slug": "..."})
        for key, value in record.__dict__.items():
            if key not in self.skip_keys:
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> dict:
    """Return the dictConfig mapping for the given settings."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter_name = "json" if settings.LOG_JSON_FORMAT else "standard"

    handlers = {
        # 控制台输出
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": formatter_name,
            "stream": sys.stdout,
        },
    }
    app_handlers = ["console"]
    error_handlers = ["console"]

    if settings.LOG_TO_FILE:
        log_path = settings.log_path
        log_path.mkdir(parents=True, exist_ok=True)
        handlers["file_info"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": formatter_name,
            "filename": str(log_path / "app.log"),
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        # Error 文件输出 (单独记录错误)
        handlers["file_error"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": formatter_name,
            "filename": str(log_path / "error.log"),
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        app_handlers = ["console", "file_info", "file_error"]
        error_handlers = ["console", "file_error"]

    return {
        "version": 1,
        "disable_existing_loggers": False,  # 重要：防止 uvicorn 日志被禁用
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JSONFormatter,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "blogstore": {
                "handlers": app_handlers,
                "level": log_level,
                "propagate": False,
            },
            "uvicorn": {
                "handlers": app_handlers[:2] if settings.LOG_TO_FILE else app_handlers,
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": app_handlers[:2] if settings.LOG_TO_FILE else app_handlers,
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": error_handlers,
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Optional[Settings] = None):
    """
    初始化日志配置，重复调用会覆盖之前的配置
    """
    logging.config.dictConfig(build_logging_config(settings or default_settings))
