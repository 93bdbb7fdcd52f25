"""日志配置：进程启动时调用一次。"""
import logging.config
from typing import Any, Dict


def setup_logging(level: str = "INFO") -> None:
    """初始化日志（输出到 stderr，不干扰菜单文本）。"""
    log_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }
    logging.config.dictConfig(log_config)
