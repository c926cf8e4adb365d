from fastapi import FastAPI, HTTPException, status, Request, Response
from fastapi.responses import JSONResponse

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from lifespan import lifespan

from interface.middleware import add_cors_middleware
from interface.routers import exercise_router
from interface.ws import websocket_router
from utilities.config import get_config
from utilities.monitoring import MonitoringFactory

config = get_config()
logger = MonitoringFactory.get_logger("main")

app = FastAPI(title=config.APP_NAME, version=config.VERSION, debug=config.DEBUG, lifespan=lifespan)

app.include_router(exercise_router, prefix=config.API_PREFIX)
app.include_router(websocket_router)

# Initialize Limiter
limiter = Limiter(key_func=get_remote_address, default_limits=["200/minute"])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

add_cors_middleware(app, config)
app.add_middleware(SlowAPIMiddleware)


# API Endpoint [ROOT]
@app.get("/")
@limiter.limit("10/minute")
async def read_root(request: Request, response: Response):
    """Root endpoint."""
    try:
        return JSONResponse(
            content={"msg": f"Welcome to {config.APP_NAME}!"}, status_code=status.HTTP_200_OK
        )
    except HTTPException as httpe:
        return JSONResponse(
            content={"msg": httpe.detail}, status_code=httpe.status_code
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=config.HOST, port=config.PORT, reload=config.DEBUG)
