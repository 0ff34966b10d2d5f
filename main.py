from fastapi import FastAPI
from contextlib import asynccontextmanager
from flashgen.core.config import settings
from flashgen.core.logging import setup_logging
from flashgen.apis.deps import close_generator
from flashgen.apis.flashcards.main import router as flashcards_router

import uvicorn
from fastapi.middleware.cors import CORSMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    try:
        yield
    finally:
        await close_generator()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=settings.app.version, lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(flashcards_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.app.port,
        reload=not settings.app.is_production,
    )


if __name__ == "__main__":
    try:
        run()
    except Exception as e:
        print(f"An error occurred when starting the server: {e}.")
