from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from lunchpass.api.routes import availability, entitlement, menu, restaurants

# Logging
logger = logging.getLogger("lunchpass_app")

# Initialize FastAPI app
app = FastAPI(title="LunchPass Entitlement & Availability API")

# Include routers
app.include_router(availability.router)
app.include_router(entitlement.router)
app.include_router(restaurants.router)
app.include_router(menu.router)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
def health():
    return {"status": "ok"}
