"""
配置管理模块

从环境变量中读取所有配置项，确保密钥等敏感信息不被硬编码
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置类"""

    # 公众号支付配置
    wx_app_id: str = ""
    wx_app_key: str = ""  # 即 paySignKey, 支付请求中用于签名的密钥
    wx_js_sign_method: str = "MD5"
    wx_native_sign_method: str = "SHA1"

    # Supabase 配置 (动态配置及商品 package 查询)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # 应用配置
    debug: bool = False
    cors_origins: list[str] = [
        "http://localhost:5173", "http://localhost:3000",
        "http://127.0.0.1:5173", "http://127.0.0.1:3000"
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    获取配置单例

    使用 lru_cache 确保配置只加载一次
    """
    return Settings()
