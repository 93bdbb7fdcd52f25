"""密码摘要测试。"""
import functools

from account_registry.auth.hashing import simple_hash


def test_known_values() -> None:
    assert simple_hash("") == "1505"  # 5381
    assert simple_hash("a") == "2b606"  # 5381 * 33 + 97


def test_deterministic_and_order_sensitive() -> None:
    assert simple_hash("secret123") == simple_hash("secret123")
    assert simple_hash("abcd") != simple_hash("abce")
    assert simple_hash("ab") != simple_hash("ba")


def test_wraps_to_64_bits() -> None:
    password = "x" * 200
    expected = format(functools.reduce(lambda h, c: (h * 33 + ord(c)) % 2 ** 64, password, 5381), "x")
    digest = simple_hash(password)
    assert digest == expected
    assert digest != format(functools.reduce(lambda h, c: (h * 33 + ord(c)) % 2 ** 32, password, 5381), "x")
    assert digest == digest.lower()
    assert 0 <= int(digest, 16) < 2 ** 64
    assert len(digest) <= 16
