"""
签名服务模块

公众号支付的签名算法: 按签名字段的字典序拼接 key=value&key=value...
(appkey 参与拼接但不传输), 再用 sign_method 指定的哈希算法做摘要并 hex 编码.
"""
import hashlib
import hmac
from typing import Any, Callable, Optional

# 签名方式 -> 哈希构造函数
HASH_METHODS: dict[str, Callable[..., Any]] = {
    "md5": hashlib.md5,
    "MD5": hashlib.md5,
    "sha1": hashlib.sha1,
    "SHA1": hashlib.sha1,
}

# Native 支付的回调及回复目前只支持 sha1
SHA1_METHODS = ("sha1", "SHA1")

# 签名字段表: (签名用的小写字段名, 记录上的属性名), 属性名为 None 的位置放 appkey
SignFields = tuple[tuple[str, Optional[str]], ...]

PAY_REQUEST_FIELDS: SignFields = (
    ("appid", "app_id"),
    ("appkey", None),
    ("noncestr", "nonce_str"),
    ("package", "package"),
    ("timestamp", "time_stamp"),
)

PAY_PACKAGE_REQUEST_FIELDS: SignFields = (
    ("appid", "app_id"),
    ("appkey", None),
    ("issubscribe", "is_subscribe"),
    ("noncestr", "nonce_str"),
    ("openid", "open_id"),
    ("productid", "product_id"),
    ("timestamp", "time_stamp"),
)

PAY_PACKAGE_RESPONSE_FIELDS: SignFields = (
    ("appid", "app_id"),
    ("appkey", None),
    ("noncestr", "nonce_str"),
    ("package", "package"),
    ("retcode", "ret_code"),
    ("reterrmsg", "ret_msg"),
    ("timestamp", "time_stamp"),
)


class SignatureError(ValueError):
    """签名相关错误的基类"""


class UnsupportedAlgorithm(SignatureError):
    """不支持的签名方式"""


class SignatureLengthMismatch(SignatureError):
    """签名长度与摘要长度不符"""


class SignatureMismatch(SignatureError):
    """签名不正确"""


def _render(value: Any) -> str:
    # bool 是 int 的子类, 按 0/1 输出
    if isinstance(value, bool):
        return str(int(value))
    if value is None:
        return ""
    return str(value)


class Signer:
    """
    按固定字段表对记录签名/验签

    Args:
        fields: 字典序的签名字段表
        uppercase: 摘要的 hex 串是否转大写 (仅 JS API 支付参数如此)
        methods: 该记录允许的签名方式, 默认 HASH_METHODS 中的全部
    """

    def __init__(self, fields: SignFields, uppercase: bool = False,
                 methods: Optional[tuple[str, ...]] = None):
        self.fields = fields
        self.uppercase = uppercase
        self.methods = tuple(HASH_METHODS) if methods is None else methods

    def hash_for(self, sign_method: str):
        """根据签名方式返回哈希构造函数, 不支持时抛出 UnsupportedAlgorithm"""
        if sign_method not in self.methods:
            raise UnsupportedAlgorithm(f"unknown sign method: {sign_method!r}")
        return HASH_METHODS[sign_method]

    def signing_string(self, record: Any, app_key: str) -> str:
        """拼接待签名字符串, 不含 signature 和 sign_method 字段"""
        parts = []
        for key, attr in self.fields:
            value = app_key if attr is None else getattr(record, attr)
            parts.append(f"{key}={_render(value)}")
        return "&".join(parts)

    def digest(self, record: Any, app_key: str) -> str:
        """计算记录的签名, 不修改记录"""
        hash_func = self.hash_for(record.sign_method)
        signature = hash_func(self.signing_string(record, app_key).encode("utf-8")).hexdigest()
        if self.uppercase:
            signature = signature.upper()
        return signature

    def sign(self, record: Any, app_key: str) -> str:
        """
        计算签名并写入 record.signature

        NOTE: 要求 record 其他字段设置完毕后才能调用, 否则签名就不正确.
        """
        signature = self.digest(record, app_key)
        record.signature = signature
        return signature

    def verify(self, record: Any, app_key: str) -> None:
        """
        检查 record.signature 是否正确, 正确时返回 None

        Raises:
            UnsupportedAlgorithm: 签名方式不支持
            SignatureLengthMismatch: 签名长度不对
            SignatureMismatch: 签名不正确
        """
        hash_func = self.hash_for(record.sign_method)
        want_len = hash_func().digest_size * 2
        have = record.signature or ""
        if len(have) != want_len:
            raise SignatureLengthMismatch(
                f"不正确的签名: {have!r}, 长度不对, have: {len(have)}, want: {want_len}"
            )

        expected = self.digest(record, app_key)
        if not hmac.compare_digest(expected.encode("utf-8"), have.encode("utf-8")):
            raise SignatureMismatch(f"不正确的签名, have: {have!r}")


pay_request_signer = Signer(PAY_REQUEST_FIELDS, uppercase=True)
pay_package_request_signer = Signer(PAY_PACKAGE_REQUEST_FIELDS, methods=SHA1_METHODS)
pay_package_response_signer = Signer(PAY_PACKAGE_RESPONSE_FIELDS, methods=SHA1_METHODS)
