"""
商品 package 服务模块

Native 支付回调只带 ProductId, 这里根据商品 ID 查出对应的订单详情 package
"""
import logging
from wxpay.services.supabase_client import get_supabase_client, supabase_configured

logger = logging.getLogger(__name__)


def get_product_package(product_id: str) -> str | None:
    """
    查询商品对应的 package 字符串

    Returns:
        package 字符串, 商品不存在时返回 None
    """
    if not product_id or not supabase_configured():
        return None

    supabase = get_supabase_client()
    res = supabase.table("pay_packages").select("package").eq("product_id", product_id).execute()
    if not res.data:
        logger.info(f"Product not found: {product_id}")
        return None
    return res.data[0]["package"]
