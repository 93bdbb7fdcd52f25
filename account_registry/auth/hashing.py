"""密码摘要。

``simple_hash`` 是 djb2 风格的乘法滚动哈希（种子 5381，每个字符 ×33 再加码点），
按 64 位无符号整数回绕，结果为小写十六进制、不补零。

注意：它不具备任何密码学强度，容易碰撞，也可以被暴力枚举，只用于相等比较。
存储通过 ``Digest`` 接口调用它，更强的算法可以直接替换而不改动文件字段布局。
"""
from typing import Callable

Digest = Callable[[str], str]

_SEED = 5381
_MASK = 0xFFFFFFFFFFFFFFFF


def simple_hash(password: str) -> str:
    acc = _SEED
    for c in password:
        acc = (acc * 33 + ord(c)) & _MASK
    return format(acc, "x")
