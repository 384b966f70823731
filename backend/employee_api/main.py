from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiohttp
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from employee_api.api.v1.router import api_router
from employee_api.core.config import settings
from employee_api.services.employee_client import EmployeeApiClient
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    session = aiohttp.ClientSession()
    client = EmployeeApiClient(
        session,
        settings.EMPLOYEE_API_BASE_URL,
        timeout_seconds=settings.EMPLOYEE_API_TIMEOUT_SECONDS,
    )
    application.state.employee_client = client
    application.state.employee_service = EmployeeService(client)
    logger.info("EmployeeService initialized (upstream=%s)", client.base_url)
    try:
        yield
    finally:
        application.state.employee_service = None
        application.state.employee_client = None
        await session.close()


app = FastAPI(
    title="Employee API",
    description="Employee search and salary views over the upstream employee API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee API"}
