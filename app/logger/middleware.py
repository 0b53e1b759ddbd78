from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
import time

from app.logger.logger import logger


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        # Тело запроса не логируем: в multipart приходят изображения
        logger.info("Incoming request", extra={
            "event": "request",
            "method": request.method,
            "url": str(request.url),
            "content_type": request.headers.get("content-type"),
            "content_length": request.headers.get("content-length"),
        })

        try:
            response = await call_next(request)

            logger.info("Response sent", extra={
                "event": "response",
                "status_code": response.status_code,
                "method": request.method,
                "url": str(request.url),
            })

            return response
        except Exception as e:
            logger.error("Error occurred", extra={
                "event": "error",
                "error": str(e),
                "method": request.method,
                "url": str(request.url),
            })
            return JSONResponse(status_code=500, content={"detail": "Что-то пошло не так"})
        finally:
            process_time = time.time() - start_time
            logger.info("Request handling time", extra={
                "event": "process_time",
                "method": request.method,
                "url": str(request.url),
                "process_time": round(process_time, 4),
            })
