from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_employee_api_client
from app.services.employee_api_client import EmployeeApiClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    client: EmployeeApiClient = Depends(get_employee_api_client),  # noqa: B008
):
    services: dict[str, str] = {}

    ok = await client.check_connection()
    services["employee_api"] = "ok" if ok else "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
