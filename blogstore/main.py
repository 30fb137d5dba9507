import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from blogstore.core.config import settings
from blogstore.core.logger import setup_logging
from blogstore.routers import articles, site


logger = logging.getLogger("blogstore.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    logger.info("Starting %s v%s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    description="Read-only API over the blog's site configuration and articles",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 只读接口，任何前端都可以读取
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def log_request(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    if request.url.path.startswith(settings.API_V1_PREFIX):
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            process_time * 1000,
            extra={"path": request.url.path, "status_code": response.status_code},
        )
    return response


# Include routers
app.include_router(articles.router, prefix=settings.API_V1_PREFIX)
app.include_router(site.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root():
    return {"message": "Welcome to the amanhimself.dev content API", "docs": "/docs"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
