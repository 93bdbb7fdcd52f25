"""账号登记全局配置与路径。"""
from pathlib import Path

# 项目根目录（account_registry 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
# 数据目录：用户记录文件
DATA_DIR = ROOT_DIR / "data"
USERS_DB_PATH = DATA_DIR / "users.db"  # 每行一条账号记录

# 注册时的本地校验
MIN_PASSWORD_LENGTH = 4

# 日志
LOG_LEVEL = "WARNING"  # 菜单与日志共用终端，默认只输出警告


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
