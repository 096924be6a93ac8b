import os

import pytest

# 测试环境配置, 需在导入 wxpay.main 之前设置
os.environ["WX_APP_ID"] = "wx2421b1c4370ec43b"
os.environ["WX_APP_KEY"] = "testkey123"
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = ""

from wxpay.config import get_settings
from wxpay.services.config_service import clear_config_cache


@pytest.fixture(autouse=True)
def fresh_config():
    """每个用例前后清除配置缓存, 使 monkeypatch.setenv 生效"""
    get_settings.cache_clear()
    clear_config_cache()
    yield
    get_settings.cache_clear()
    clear_config_cache()
