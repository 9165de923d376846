import os
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import config
from src.project_api.exceptions import ProjectTrackerException
from src.project_api.logging_config import logger, setup_logging
from src.project_api.routes import projects

# 로깅 설정 초기화
setup_logging()

app = FastAPI(
    redirect_slashes=False,
    title=config.get("api", "title"),
    description=config.get("api", "description"),
    version=config.get("api", "version"),
)

# Gzip 압축 미들웨어 추가
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Prometheus 모니터링 초기화 (테스트 환경 제외)
if os.getenv("APP_ENV") != "test":
    Instrumentator().instrument(app).expose(app)
    logger.info("Prometheus Instrumentator initialized")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@app.exception_handler(ProjectTrackerException)
async def project_tracker_exception_handler(request: Request, exc: ProjectTrackerException):
    error_code = exc.__class__.__name__.replace("Error", "").upper()
    if error_code == "PROJECTTRACKEREXCEPTION":
        error_code = "INTERNAL_ERROR"

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": f"about:blank#{exc.__class__.__name__.lower()}",
            "title": exc.__class__.__name__,
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url),
            "code": error_code,
            "extensions": {"timestamp": _timestamp()},
        },
        headers=exc.headers,
    )


# 405 (Method Not Allowed), 라우트 없음 404 등 프레임워크 에러
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": "about:blank#http-exception",
            "title": "HTTP Exception",
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url),
            "code": f"HTTP_{exc.status_code}",
            "extensions": {"timestamp": _timestamp()},
        },
        headers=exc.headers,
    )


# 라우터 포함
app.include_router(projects.router, prefix="/projects", tags=["projects"])

# CORS 설정
allowed_origins_raw = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:8080")
origins = [origin.strip() for origin in allowed_origins_raw.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}")
    return response


@app.on_event("startup")
async def startup():
    port = config.get("server", "port")
    logger.info(f"Project Tracking API is running on port {port}...")


@app.get("/health")
def health_check():
    return {"status": "ok"}


def run():
    """uvicorn 으로 API 서버 실행"""
    import uvicorn

    uvicorn.run(app, host=config.get("server", "host"), port=int(config.get("server", "port")))


if __name__ == "__main__":
    run()
