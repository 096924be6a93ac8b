"""
配置服务模块

提供从数据库动态加载配置的功能, 并支持环境变量回退
"""
import logging
from typing import Any, Dict
from wxpay.config import get_settings
from wxpay.services.supabase_client import get_supabase_client, supabase_configured

logger = logging.getLogger(__name__)


class ConfigService:
    _config_cache: Dict[str, str] = {}
    _loaded = False

    @classmethod
    def clear_cache(cls):
        """清除配置缓存, 确保下次获取时从数据库读取最新值"""
        cls._config_cache = {}
        cls._loaded = False

    @classmethod
    def get_all_config(cls, force_refresh: bool = False) -> Dict[str, str]:
        """
        获取所有动态配置项

        未配置 Supabase 时直接返回空字典
        """
        if not supabase_configured():
            return {}

        if not cls._loaded or force_refresh:
            try:
                supabase = get_supabase_client()
                res = supabase.table("system_config").select("key", "value").execute()
                if res.data:
                    cls._config_cache = {item["key"]: item["value"] for item in res.data}
                else:
                    cls._config_cache = {}
                cls._loaded = True
            except Exception as e:
                logger.error(f"Failed to fetch system config: {str(e)}")
                # 数据库查询失败时回退到环境变量
                return {}
        return cls._config_cache

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        获取特定配置项, 数据库优先, 环境变量次之
        """
        configs = cls.get_all_config()
        if key in configs:
            return configs[key]

        settings = get_settings()
        if hasattr(settings, key):
            return getattr(settings, key)

        return default


def get_config(key: str, default: Any = None) -> Any:
    """快捷获取配置的函数"""
    return ConfigService.get(key, default)


def clear_config_cache():
    """清除配置缓存"""
    ConfigService.clear_cache()
