"""
Supabase 客户端模块

提供 Supabase 客户端的初始化
"""
from supabase import create_client, Client
from wxpay.config import get_settings


def supabase_configured() -> bool:
    """是否配置了 Supabase"""
    settings = get_settings()
    return bool(settings.supabase_url and settings.supabase_service_role_key)


def get_supabase_client() -> Client:
    """
    获取 Supabase 客户端实例

    使用 service_role_key 以便后端读取配置表和商品表
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key
    )
