"""
Native 支付相关的请求/响应模型

公众平台接到用户点击 Native 支付 URL 之后, 会 POST xml 到商户注册的回调 URL
获取订单 package, 商户以 PayPackageResponse 回复.
"""
from pydantic import BaseModel, ConfigDict, Field

from wxpay.services.signer import pay_package_request_signer, pay_package_response_signer


class PayPackageRequest(BaseModel):
    """获取订单 package 的回调请求"""
    model_config = ConfigDict(populate_by_name=True)

    app_id: str = Field("", alias="AppId", description="公众帐号的appid")
    nonce_str: str = Field("", alias="NonceStr", description="随机串")
    time_stamp: int = Field(0, alias="TimeStamp", description="时间戳")
    open_id: str = Field("", alias="OpenId", description="点击链接准备购买商品的用户标识")
    is_subscribe: int = Field(0, ge=0, le=1, alias="IsSubscribe", description="1 为关注, 0 为未关注")
    product_id: str = Field("", alias="ProductId", description="第三方的商品ID 号")
    signature: str = Field("", alias="AppSignature", description="参数的加密签名")
    sign_method: str = Field("SHA1", alias="SignMethod", description="签名方式, 不参与签名")

    def check_signature(self, app_key: str) -> None:
        """
        检查签名是否正确, 正确时返回 None

        app_key: 即 paySignKey, 公众号支付请求中用于加密的密钥 Key

        Raises:
            SignatureError: 签名方式不支持, 长度不对或签名不正确
        """
        pay_package_request_signer.verify(self, app_key)

    def set_signature(self, app_key: str) -> str:
        """设置签名字段 (平台侧/测试用)"""
        return pay_package_request_signer.sign(self, app_key)


class PayPackageResponse(BaseModel):
    """获取订单 package 的回复"""
    model_config = ConfigDict(populate_by_name=True)

    app_id: str = Field(..., alias="AppId", description="公众帐号的appid")
    nonce_str: str = Field(..., alias="NonceStr", description="随机串")
    time_stamp: int = Field(..., alias="TimeStamp", description="时间戳")
    package: str = Field("", alias="Package", description="订单详情, 4096个字符以内")
    # 可以自己定义错误信息
    ret_code: int = Field(0, alias="RetCode", description="0 表示正确")
    ret_msg: str = Field("", alias="RetErrMsg", description="错误信息, utf8 编码")
    signature: str = Field("", alias="AppSignature", description="该回复自身的签名")
    sign_method: str = Field("SHA1", alias="SignMethod", description="签名方式, 目前只支持 sha1")

    def set_signature(self, app_key: str) -> str:
        """
        设置签名字段

        NOTE: 要求其他字段设置完毕后才能调用这个函数, 否则签名就不正确.
        """
        return pay_package_response_signer.sign(self, app_key)

    def check_signature(self, app_key: str) -> None:
        """检查签名是否正确, 不正确时抛出 SignatureError"""
        pay_package_response_signer.verify(self, app_key)
