"""
公众号支付签名服务 - 后端服务入口

FastAPI 应用主入口, 配置路由, 日志和 CORS
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

from wxpay.config import get_settings
from wxpay.api import payment
import logging

# 配置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 创建 FastAPI 应用
app = FastAPI(
    title="公众号支付签名服务 API",
    description="提供 Native 支付回调验签与 JS API 支付参数签名",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# 全局异常处理
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"GLOBAL ERROR: {str(exc)}", exc_info=True)
    content = {"success": False, "message": "服务内部错误"}
    if get_settings().debug:
        content["detail"] = str(exc)
    return JSONResponse(status_code=500, content=content)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(payment.router, prefix="/api")


@app.get("/")
async def root():
    """健康检查端点"""
    return {
        "status": "ok",
        "message": "公众号支付签名服务正在运行",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    """健康检查端点 (用于部署监控)"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wxpay.main:app",
        host="127.0.0.1",
        port=8000,
        reload=False
    )
