"""
JS API 支付相关的数据模型

前端通过 WeixinJSBridge 调用 getBrandWCPayRequest 时使用的参数:

    WeixinJSBridge.invoke('getBrandWCPayRequest', {
        "appId": "wx2421b1c4370ec43b",
        "timeStamp": "1395712654",
        "nonceStr": "e61463f8efa94090b1f366cccfbbb444",
        "package": "prepay_id=u802345jgfjsdfgsdg888",
        "signType": "MD5",
        "paySign": "70EA570631E4BB79628FBCA90534C63F"
    }, function (res) {});
"""
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from wxpay.services.signer import pay_request_signer


class PayRequestParameters(BaseModel):
    """getBrandWCPayRequest 的参数"""
    model_config = ConfigDict(populate_by_name=True)

    app_id: str = Field(..., alias="appId", description="公众号身份的唯一标识")
    nonce_str: str = Field(..., alias="nonceStr", description="商户生成的随机字符串, 32个字符以内")
    time_stamp: int = Field(..., alias="timeStamp", description="unixtime, 商户生成")
    package: str = Field(..., alias="package", description="订单详情组合成的字符串")
    signature: str = Field("", alias="paySign", description="该参数自身的签名")
    sign_method: str = Field("MD5", alias="signType", description="签名方式, 目前仅支持 MD5")

    @field_serializer("time_stamp", when_used="json")
    def _time_stamp_as_string(self, value: int) -> str:
        # 前端要求 timeStamp 为字符串
        return str(value)

    def set_signature(self, app_key: str) -> str:
        """
        设置签名字段

        app_key: 商户支付密钥 Key
        NOTE: 要求其他字段设置完毕后才能调用这个函数, 否则签名就不正确.
        """
        return pay_request_signer.sign(self, app_key)

    def check_signature(self, app_key: str) -> None:
        """检查签名是否正确, 不正确时抛出 SignatureError"""
        pay_request_signer.verify(self, app_key)


class PayParamsRequest(BaseModel):
    """生成 JS API 支付参数的请求"""
    package: str = Field(..., min_length=1, description="订单详情, 如 prepay_id=xxx")
