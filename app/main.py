from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi_versioning import VersionedFastAPI
import uvicorn
import time
from typing import AsyncIterator
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import engine
from app.logger.middleware import LoggingMiddleware
from app.users.router import router_users
from app.auth.router import router_auth
from app.hotels.router import router_my_hotels
from app.logger.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(f"Запуск приложения в режиме {settings.MODE}")
    yield
    await engine.dispose()

app = FastAPI(title="Hotels API")

app.include_router(router_users)
app.include_router(router_auth)
app.include_router(router_my_hotels)

app = VersionedFastAPI(app,
                       version_format='{major}',
                       prefix_format='/api/v{major}',
                       lifespan=lifespan)

origins = [
    settings.FRONTEND_URL,
]


app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(round(process_time, 4))
    return response


@app.middleware("http")
async def catch_exceptions_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except HTTPException as ex:
        return JSONResponse(
            status_code=ex.status_code,
            content={"detail": ex.detail}
        )
    except Exception as ex:
        logger.error(f"Непредвиденная ошибка: {ex}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Что-то пошло не так"}
        )


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=False)
