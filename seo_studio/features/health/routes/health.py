from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.api_route("/health", methods=["GET", "POST"], tags=["health"])
async def health_check():
    # Never touches the fetcher or the model
    return {
        "status": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
