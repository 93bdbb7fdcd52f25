"""账号核心：记录模型、存储、密码摘要与时间戳。"""
from account_registry.auth.clock import now
from account_registry.auth.hashing import Digest, simple_hash
from account_registry.auth.models import Account, AccountSummary, RegisterResult
from account_registry.auth.store import AccountStore

__all__ = [
    "Account",
    "AccountSummary",
    "AccountStore",
    "Digest",
    "RegisterResult",
    "now",
    "simple_hash",
]
