"""
Content API entry point
Run with: uv run python main.py
Or: uv run uvicorn blogstore.main:app --reload
"""
import uvicorn

from blogstore.core.config import settings

if __name__ == "__main__":
    # 日志由应用 lifespan 中的 setup_logging 接管
    uvicorn.run("blogstore.main:app", host=settings.HOST, port=settings.PORT, reload=settings.is_development, log_config=None)
