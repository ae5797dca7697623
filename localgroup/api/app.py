"""
FastAPI app
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from localgroup.core.errors import GroupInvalidError

from .admission import admission_app
from .dependencies import logger


async def group_invalid_handler(request: Request, exc: GroupInvalidError):
    await logger().ainfo(
        "api.group_rejected",
        group_name=exc.group_name,
        number_of_errors=len(exc.errors),
    )
    return JSONResponse(
        status_code=422,
        content={
            "message": str(exc),
            "errors": [e.model_dump(mode="json") for e in exc.errors],
        },
    )


app = FastAPI(
    title="Local Group Admission",
    summary="Validation and membership reconciliation for local groups.",
)

app.add_exception_handler(GroupInvalidError, group_invalid_handler)
app.include_router(admission_app)
