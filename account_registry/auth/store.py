"""账号存储：整文件读入内存，每次修改后整文件重写。

文件格式：UTF-8 文本，每行一条 ``username,password_hash,email,created_at``，
无表头。没有文件锁，多个进程同时写同一文件时后写者覆盖先写者。
"""
import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from account_registry.config import USERS_DB_PATH
from account_registry.auth.clock import now
from account_registry.auth.hashing import Digest, simple_hash
from account_registry.auth.models import Account, AccountSummary, RegisterResult

logger = logging.getLogger(__name__)


class AccountStore:
    """账号存储：按插入顺序保存账号，支持注册、登录验证与列表。"""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        digest: Digest = simple_hash,
        clock: Callable[[], str] = now,
    ):
        self._path = Path(path) if path is not None else USERS_DB_PATH
        self._digest = digest
        self._clock = clock
        self._accounts: List[Account] = []
        self.reload()

    @classmethod
    def open(cls, path: Union[str, Path], **kwargs) -> "AccountStore":
        """打开存储；文件不存在时得到空存储，首次注册成功时才创建文件。"""
        return cls(path, **kwargs)

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def reload(self) -> None:
        """从文件重新读取全部账号，跳过空白行。"""
        self._accounts = []
        try:
            with self._path.open("r", encoding="utf-8") as f:
                for line in f:
                    if line.strip():
                        self._accounts.append(Account.deserialize(line))
        except FileNotFoundError:
            logger.debug("No account file at %s, starting empty", self._path)
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read account file %s (%s), starting empty", self._path, e)
            self._accounts = []
            return
        logger.debug("Loaded %d accounts from %s", len(self._accounts), self._path)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8", newline="\n") as f:
            for account in self._accounts:
                f.write(account.serialize() + "\n")

    def username_exists(self, username: str) -> bool:
        """用户名是否已存在（精确匹配，不去空白）。"""
        return any(a.username == username for a in self._accounts)

    def email_exists(self, email: str) -> bool:
        """邮箱是否已存在（精确匹配，不去空白）。"""
        return any(a.email == email for a in self._accounts)

    def register(self, username: str, password: str, email: str) -> RegisterResult:
        """注册新账号。用户名或邮箱已存在时不做任何写入。

        不校验密码强度，最短长度由调用方检查。写文件失败时抛出 ``OSError``，
        内存中的新账号同时撤回。
        """
        if self.username_exists(username) or self.email_exists(email):
            logger.info("Registration rejected for %r: username or email taken", username)
            return RegisterResult.ALREADY_EXISTS
        account = Account(
            username=username,
            password_hash=self._digest(password),
            email=email,
            created_at=self._clock(),
        )
        self._accounts.append(account)
        try:
            self._save()
        except OSError:
            self._accounts.pop()
            raise
        logger.info("Registered account %r", username)
        return RegisterResult.SUCCESS

    def login(self, username: str, password: str) -> bool:
        """登录：用户名与密码摘要都匹配才返回 True，不区分是哪一项不对。"""
        password_hash = self._digest(password)
        ok = any(
            a.username == username and a.password_hash == password_hash
            for a in self._accounts
        )
        logger.debug("Login for %r: %s", username, "ok" if ok else "failed")
        return ok

    def list_all(self) -> List[AccountSummary]:
        """按存储顺序列出全部账号（不含密码摘要）。"""
        return [a.summary() for a in self._accounts]
