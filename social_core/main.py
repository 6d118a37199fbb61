import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from social_core.configs import configure_logging, get_settings
from social_core.exceptions import (
    DuplicateRequestError,
    InvalidOperationError,
    NotFoundError,
    StoreError,
    StoreUnavailableError,
)
from social_core.models import init_db
from social_core.routers import friend_request_router, message_router, post_router, user_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Relo Social Core",
    description="Lõi nhất quán cho quan hệ bạn bè, tương tác bài đăng và tin nhắn trực tiếp.",
    version="1.0.0"
)

# Exception handler cho RequestValidationError (Pydantic validation)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    error_messages = []
    for error in errors:
        field = " -> ".join(str(loc) for loc in error["loc"])
        message = error.get("msg", "Validation error")
        error_messages.append(f"{field}: {message}")

    detail = "; ".join(error_messages) if error_messages else "Lỗi validation dữ liệu"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail}
    )

# Ánh xạ lỗi nghiệp vụ sang mã HTTP
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(InvalidOperationError)
async def invalid_operation_handler(request: Request, exc: InvalidOperationError):
    if isinstance(exc, DuplicateRequestError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    if isinstance(exc, StoreUnavailableError):
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Lỗi server"})

# Kết nối với cơ sở dữ liệu khi khởi động
@app.on_event("startup")
async def startup_db_client():
    configure_logging(get_settings().log_level)
    await init_db()

# Gắn các router
app.include_router(user_router.router, prefix="/api/users", tags=["Người dùng"])
app.include_router(friend_request_router.router, prefix="/api/friend-requests", tags=["Kết bạn"])
app.include_router(post_router.router, prefix="/api/posts", tags=["Bài viết"])
app.include_router(message_router.router, prefix="/api/messages", tags=["Tin nhắn"])

@app.get("/")
def read_root():
    return {"message": "Máy chủ đang chạy"}
