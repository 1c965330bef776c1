from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..features.quiz import QuizManager, create_quiz_routers
from ..settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, manager: QuizManager | None = None) -> FastAPI:
    settings = settings or load_settings()
    application = FastAPI(title="Growth Compass")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    router_v1, router_legacy = create_quiz_routers(manager or QuizManager())
    application.include_router(router_v1)
    application.include_router(router_legacy)

    @application.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logger.info("starting quiz service", extra={"host": settings.host, "port": settings.port})
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    main()
