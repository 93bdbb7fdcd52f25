"""创建时间：本地时区，固定格式。"""
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now() -> str:
    """返回当前本地时间，如 ``2024-05-01 09:03:07``。"""
    return datetime.now().strftime(TIMESTAMP_FORMAT)
