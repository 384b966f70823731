"""HTTP adapter for the upstream employee API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from employee_api.models.employee import Employee, EmployeeInput, Envelope
from employee_api.services.errors import (
    EmployeeCreationError,
    EmployeeNotFoundError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

HEALTH_CHECK_TIMEOUT_SECONDS = 10


class _UpstreamStatusError(Exception):
    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Upstream responded {status} - {body}")
        self.status = status


class EmployeeApiClient:
    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_all(self) -> list[Employee]:
        try:
            payload = await self._get_json(self.base_url)
            envelope = Envelope[list[Any]].model_validate(payload or {})
        except (_UpstreamStatusError, aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error("Error fetching employees: %s", e)
            raise UpstreamError(f"Failed to fetch employees: {e}") from e

        if envelope.data is None:
            logger.warning("Received empty employee list payload")
            return []

        employees: list[Employee] = []
        for record in envelope.data:
            try:
                employees.append(Employee.model_validate(record))
            except ValidationError as e:
                logger.warning("Skipping invalid employee record %r: %s", record, e)

        logger.info("Fetched %d employees", len(employees))
        return employees

    async def fetch_by_id(self, employee_id: str) -> Employee:
        try:
            payload = await self._get_json(f"{self.base_url}/{employee_id}")
            envelope = Envelope[Employee].model_validate(payload or {})
        except _UpstreamStatusError as e:
            if e.status == 404:
                raise EmployeeNotFoundError(employee_id) from e
            logger.error("Error fetching employee by id %s: %s", employee_id, e)
            raise UpstreamError(f"Failed to fetch employee by ID: {employee_id}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error("Error fetching employee by id %s: %s", employee_id, e)
            raise UpstreamError(f"Failed to fetch employee by ID: {employee_id}") from e

        if envelope.data is None:
            logger.info("Employee with id %s not found", employee_id)
            raise EmployeeNotFoundError(employee_id)

        return envelope.data

    async def create(self, employee_input: EmployeeInput) -> Employee:
        body = employee_input.model_dump(exclude_none=True)
        try:
            async with self.session.post(self.base_url, json=body, timeout=self.timeout) as response:
                payload = await self._read_json(response)
            envelope = Envelope[Employee].model_validate(payload or {})
        except (_UpstreamStatusError, aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error("Error creating employee %r: %s", employee_input, e)
            raise UpstreamError(f"Failed to create employee {employee_input!r}") from e

        if envelope.data is None:
            logger.error("Upstream returned no employee for %r", employee_input)
            raise EmployeeCreationError(employee_input)

        return envelope.data

    async def check_connection(self) -> bool:
        try:
            timeout = aiohttp.ClientTimeout(total=HEALTH_CHECK_TIMEOUT_SECONDS)
            async with self.session.get(self.base_url, timeout=timeout) as response:
                return response.status == 200
        except Exception:
            logger.exception("Employee API connection check failed")
            return False

    async def _get_json(self, url: str) -> Any:
        async with self.session.get(url, timeout=self.timeout) as response:
            return await self._read_json(response)

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        if not 200 <= response.status < 300:
            error_text = await response.text()
            raise _UpstreamStatusError(response.status, error_text)
        # upstream may omit or mislabel the content type
        return await response.json(content_type=None)
