from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, StrictInt

from .schemas import SessionCreated
from .service import DEFAULT_SESSION_ID, QuizManager

__all__ = ["AnswerRequest", "create_quiz_routers"]


class AnswerRequest(BaseModel):
    option: StrictInt


class _QuizController:
    def __init__(self, manager: QuizManager) -> None:
        self.manager = manager

    # ------------------------------------------------------------------ helpers
    def _json_response(self, data: dict[str, object]) -> JSONResponse:
        return JSONResponse(data)

    # ------------------------------------------------------------------ actions
    async def create(self) -> Response:
        session_id = await self.manager.create_session_async()
        return self._json_response(SessionCreated(session=session_id).to_dict())

    async def discard(self, sid: str) -> Response:
        try:
            await self.manager.discard_session_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return Response(status_code=204)

    async def answer_learning_style(self, sid: str, body: AnswerRequest) -> Response:
        try:
            await self.manager.submit_learning_style_async(sid, body.option)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return Response(status_code=200)

    async def answer_wellbeing(self, sid: str, body: AnswerRequest) -> Response:
        try:
            await self.manager.submit_wellbeing_async(sid, body.option)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return Response(status_code=200)

    async def summary(self, sid: str) -> Response:
        try:
            summary = await self.manager.summary_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        return self._json_response(summary.to_dict())

    def recommendation(self, interest_area: str, learning_style: str) -> Response:
        payload = self.manager.recommendation(interest_area, learning_style)
        return self._json_response(payload.to_dict())


def create_quiz_routers(manager: QuizManager) -> tuple[APIRouter, APIRouter]:
    """Build the per-session v1 router and the legacy shared-session router."""

    controller = _QuizController(manager)

    router_v1 = APIRouter(prefix="/api/v1/quiz", tags=["quiz"])
    router_legacy = APIRouter(prefix="/api/quiz", tags=["quiz-legacy"])

    @router_v1.get("/recommendation")
    def get_recommendation(
        interest_area: str = Query(..., alias="interestArea"),
        learning_style: str = Query(..., alias="learningStyle"),
    ) -> Response:
        return controller.recommendation(interest_area, learning_style)

    @router_legacy.get("/recommendation")
    def get_recommendation_legacy(
        interest_area: str = Query(..., alias="interestArea"),
        learning_style: str = Query(..., alias="learningStyle"),
    ) -> Response:
        return controller.recommendation(interest_area, learning_style)

    @router_v1.post("")
    async def create_session() -> Response:
        return await controller.create()

    @router_v1.delete("/{sid}")
    async def discard_session(sid: str) -> Response:
        return await controller.discard(sid)

    @router_v1.post("/{sid}/answer/learning-style")
    async def post_learning_style(sid: str, body: AnswerRequest) -> Response:
        return await controller.answer_learning_style(sid, body)

    @router_legacy.post("/answer/learning-style")
    async def post_learning_style_legacy(body: AnswerRequest) -> Response:
        return await controller.answer_learning_style(DEFAULT_SESSION_ID, body)

    @router_v1.post("/{sid}/answer/wellbeing")
    async def post_wellbeing(sid: str, body: AnswerRequest) -> Response:
        return await controller.answer_wellbeing(sid, body)

    @router_legacy.post("/answer/wellbeing")
    async def post_wellbeing_legacy(body: AnswerRequest) -> Response:
        return await controller.answer_wellbeing(DEFAULT_SESSION_ID, body)

    @router_v1.get("/{sid}/results/summary")
    async def get_summary(sid: str) -> Response:
        return await controller.summary(sid)

    @router_legacy.get("/results/summary")
    async def get_summary_legacy() -> Response:
        return await controller.summary(DEFAULT_SESSION_ID)

    return router_v1, router_legacy
