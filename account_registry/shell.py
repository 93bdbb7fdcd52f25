"""控制台菜单：注册、登录、列出用户、退出。"""
import logging
import sys
from typing import Callable, Optional, TextIO

from account_registry.config import MIN_PASSWORD_LENGTH
from account_registry.auth.models import RegisterResult
from account_registry.auth.store import AccountStore

logger = logging.getLogger(__name__)

MENU = (
    "\n====== LOGIN & REGISTRATION SYSTEM ======\n"
    "1. Register\n"
    "2. Login\n"
    "3. List Users (Admin Demo)\n"
    "4. Exit\n"
    "Choose an option: "
)

CHOICE_REGISTER = 1
CHOICE_LOGIN = 2
CHOICE_LIST = 3
CHOICE_EXIT = 4

USERNAME_WIDTH = 15
EMAIL_WIDTH = 25
RULE_WIDTH = 60


class Shell:
    """菜单循环：收集输入并调用 AccountStore，结果以文本输出。"""

    def __init__(
        self,
        store: AccountStore,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ):
        self._store = store
        self._input = input_func if input_func is not None else sys.stdin.readline
        self._out = output if output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _ask(self, prompt: str) -> str:
        """读取一个非空输入；空白行被跳过，继续等待。"""
        self._write(prompt)
        while True:
            line = self._input()
            # readline 在输入结束时返回空串
            if line == "":
                raise EOFError
            value = line.strip()
            if value:
                return value

    def _read_choice(self) -> Optional[int]:
        raw = self._ask(MENU)
        try:
            return int(raw)
        except ValueError:
            return None

    def run(self) -> int:
        """循环直到选择退出（或输入结束），返回进程退出码 0。"""
        while True:
            try:
                choice = self._read_choice()
                if choice == CHOICE_EXIT:
                    self._write("Exiting program. Goodbye!\n")
                    return 0
                if choice == CHOICE_REGISTER:
                    self.handle_register()
                elif choice == CHOICE_LOGIN:
                    self.handle_login()
                elif choice == CHOICE_LIST:
                    self.handle_list()
                else:
                    self._write("Invalid option. Try again.\n")
            except EOFError:
                logger.debug("Input closed, leaving menu loop")
                self._write("\n")
                return 0

    def handle_register(self) -> None:
        self._write("\n--- Registration ---\n")
        username = self._ask("Username: ")
        email = self._ask("Email: ")
        password = self._ask("Password: ")

        if len(password) < MIN_PASSWORD_LENGTH:
            self._write(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.\n")
            return

        if self._store.register(username, password, email) == RegisterResult.SUCCESS:
            self._write("Registration successful!\n")
        else:
            self._write("Username or email already exists.\n")

    def handle_login(self) -> None:
        self._write("\n--- Login ---\n")
        username = self._ask("Username: ")
        password = self._ask("Password: ")

        if self._store.login(username, password):
            self._write(f"Login successful. Welcome, {username}!\n")
        else:
            self._write("Invalid username or password.\n")

    def handle_list(self) -> None:
        # 演示用途，不做权限检查
        lines = [
            "\nRegistered Users:",
            f"{'Username':<{USERNAME_WIDTH}}{'Email':<{EMAIL_WIDTH}}Created At",
            "-" * RULE_WIDTH,
        ]
        for row in self._store.list_all():
            lines.append(f"{row.username:<{USERNAME_WIDTH}}{row.email:<{EMAIL_WIDTH}}{row.created_at}")
        self._write("\n".join(lines) + "\n")
