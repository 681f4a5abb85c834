from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .config import get_config
from .core.container import container
from .core.ports import StoreError
from .domains.profile import router as profile_router
from .domains.meetings import router as meetings_router
from .domains.feedback import router as feedback_router
from .domains.insights import router as insights_router

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="MeetPulse - Meeting Feedback Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Any store failure surfaces as a generic server error."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse({"message": "Server error"}, status_code=500)


@app.get(f"{config.api_prefix}/health")
async def health():
    """Report which store backs the service and whether it answers."""
    return JSONResponse({
        "status": "ok",
        "store": container.database_type,
        "connected": container.store().is_connected(),
    })


app.include_router(profile_router, prefix=config.api_prefix)
app.include_router(meetings_router, prefix=config.api_prefix)
app.include_router(feedback_router, prefix=config.api_prefix)
app.include_router(insights_router, prefix=config.api_prefix)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.api_host, port=config.api_port)
