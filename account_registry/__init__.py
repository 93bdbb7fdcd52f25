"""本地账号登记：注册、登录、用户列表，数据保存在平面文本文件中。"""
__version__ = "0.1.0"
