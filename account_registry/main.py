"""入口：打开账号存储，进入控制台菜单。"""
import logging
import sys

from account_registry import __version__
from account_registry.auth.store import AccountStore
from account_registry.config import LOG_LEVEL, USERS_DB_PATH, ensure_dirs
from account_registry.logging_config import setup_logging
from account_registry.shell import Shell

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(LOG_LEVEL)
    ensure_dirs()
    logger.info("account-registry %s using %s", __version__, USERS_DB_PATH)

    store = AccountStore(USERS_DB_PATH)
    code = Shell(store).run()

    logger.info("Exiting with code %d", code)
    sys.exit(code)


if __name__ == "__main__":
    main()
