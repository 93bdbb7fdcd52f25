"""账号记录数据模型与单行文本编解码。"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

FIELD_SEPARATOR = ","
FIELD_COUNT = 4
_WHITESPACE = " \t\n\r"


class RegisterResult(str, Enum):
    """注册结果。"""
    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"  # 用户名或邮箱已被占用


class Account(BaseModel):
    """账号（创建后不可修改）。

    字段内不能出现逗号：序列化不做转义，含逗号的值读回时会错位。
    """
    username: str = Field(..., description="登录账号，全局唯一，区分大小写")
    password_hash: str = Field(..., description="密码摘要，从不保存明文")
    email: str = Field(..., description="邮箱，全局唯一，区分大小写")
    created_at: str = Field(..., description="创建时间 YYYY-MM-DD HH:MM:SS")

    model_config = ConfigDict(frozen=True)

    def serialize(self) -> str:
        """按 username,password_hash,email,created_at 顺序拼成一行（不含换行）。"""
        return FIELD_SEPARATOR.join(
            (self.username, self.password_hash, self.email, self.created_at)
        )

    @classmethod
    def deserialize(cls, line: str) -> "Account":
        """解析一行记录。字段不足四个时缺失的部分为空字符串，多余的部分忽略。"""
        parts = line.split(FIELD_SEPARATOR)[:FIELD_COUNT]
        parts += [""] * (FIELD_COUNT - len(parts))
        username, password_hash, email, created_at = (p.strip(_WHITESPACE) for p in parts)
        return cls(
            username=username,
            password_hash=password_hash,
            email=email,
            created_at=created_at,
        )

    def summary(self) -> "AccountSummary":
        return AccountSummary(
            username=self.username,
            email=self.email,
            created_at=self.created_at,
        )


class AccountSummary(BaseModel):
    """用户列表中的一行，不含密码摘要。"""
    username: str
    email: str
    created_at: str

    model_config = ConfigDict(frozen=True)
