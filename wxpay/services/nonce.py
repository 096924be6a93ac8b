"""
随机串与时间戳工具
"""
import time
import uuid


def new_nonce_str() -> str:
    """生成 32 个字符的随机串"""
    return uuid.uuid4().hex


def new_time_stamp() -> int:
    """当前 unix 时间 (秒)"""
    return int(time.time())
