from fastapi import FastAPI, Query, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from daily_puzzles.api.dependencies import HandlerDep, lifespan
from daily_puzzles.config import configure_logging, settings

configure_logging()

app = FastAPI(
    title="Daily Puzzles API",
    description="Daily sudoku and wordle provisioning backed by Redis and Supabase",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health")
async def health(handler: HandlerDep) -> Response:
    """Health check endpoint."""
    result = await handler.health_check()
    if result.status != "healthy":
        return JSONResponse(result.model_dump(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return JSONResponse(result.model_dump())


@app.get("/")
async def puzzles(
    handler: HandlerDep,
    force_run: str | None = Query(None, alias="forceRun"),
    key: str | None = Query(None),
) -> Response:
    """
    Provision or fetch the daily puzzles.

    - `?forceRun=true` stores today's puzzles now
    - `?key=YYYY-MM-DD` returns the puzzles cached for that date
    """
    return await handler.route(force_run=force_run, key=key)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "daily_puzzles.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
