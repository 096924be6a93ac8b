"""
支付相关 API 端点

处理 Native 支付获取订单 package 的回调, 以及 JS API 支付参数的生成
"""
import logging
from fastapi import APIRouter, HTTPException, Request, Response
from wxpay.schemas.js import PayParamsRequest, PayRequestParameters
from wxpay.schemas.native import PayPackageRequest, PayPackageResponse
from wxpay.services.config_service import get_config
from wxpay.services.nonce import new_nonce_str, new_time_stamp
from wxpay.services.package_service import get_product_package
from wxpay.services.signer import SignatureError
from wxpay.services.wire import WireFormatError, from_xml, to_xml

router = APIRouter(prefix="/payment", tags=["支付"])
logger = logging.getLogger(__name__)


def get_pay_credentials() -> tuple[str, str]:
    """
    获取 appid 和支付签名密钥

    任一未配置时拒绝服务, 避免用空密钥验签
    """
    app_id = get_config("wx_app_id")
    app_key = get_config("wx_app_key")
    if not app_id or not app_key:
        logger.error("wx_app_id or wx_app_key is not configured")
        raise HTTPException(status_code=500, detail="签名配置错误")
    return app_id, app_key


@router.post("/native/package")
async def native_package_callback(request: Request) -> Response:
    """
    接收公众平台获取订单 package 的回调

    验签通过后查出商品 package, 以签名后的 xml 回复
    """
    app_id, app_key = get_pay_credentials()

    # 1. 解析 xml
    body = await request.body()
    try:
        req = from_xml(PayPackageRequest, body)
    except WireFormatError as e:
        logger.warning(f"Invalid package request: {str(e)}")
        raise HTTPException(status_code=400, detail="报文格式不正确")

    # 2. 验签
    if req.app_id != app_id:
        logger.warning(f"Package request for unknown appid: {req.app_id}")
        raise HTTPException(status_code=403, detail="appid 不匹配")
    try:
        req.check_signature(app_key)
    except SignatureError as e:
        logger.warning(
            f"Package request signature verification failed for product: {req.product_id}, "
            f"openid: {req.open_id}: {str(e)}"
        )
        raise HTTPException(status_code=403, detail="签名校验失败")

    # 3. 查询商品 package
    resp = PayPackageResponse(
        app_id=app_id,
        nonce_str=new_nonce_str(),
        time_stamp=new_time_stamp(),
        sign_method=get_config("wx_native_sign_method"),
    )
    try:
        package = get_product_package(req.product_id)
    except Exception as e:
        logger.error(f"Product package lookup error: {str(e)}")
        resp.ret_code = 1
        resp.ret_msg = "系统繁忙"
    else:
        if package is None:
            resp.ret_code = 1
            resp.ret_msg = "商品不存在"
        else:
            resp.package = package

    # 4. 所有字段设置完毕后再签名
    try:
        resp.set_signature(app_key)
    except SignatureError as e:
        logger.error(f"Package response signing error: {str(e)}")
        raise HTTPException(status_code=500, detail="签名配置错误")

    return Response(content=to_xml(resp), media_type="application/xml")


@router.post("/js/params")
async def create_js_pay_params(request: PayParamsRequest) -> dict:
    """
    生成前端 getBrandWCPayRequest 所需的支付参数
    """
    app_id, app_key = get_pay_credentials()
    params = PayRequestParameters(
        app_id=app_id,
        nonce_str=new_nonce_str(),
        time_stamp=new_time_stamp(),
        package=request.package,
        sign_method=get_config("wx_js_sign_method"),
    )
    try:
        params.set_signature(app_key)
    except SignatureError as e:
        logger.error(f"Pay request signing error: {str(e)}")
        raise HTTPException(status_code=500, detail="签名配置错误")

    return params.model_dump(by_alias=True, mode="json")
