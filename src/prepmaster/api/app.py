"""FastAPI service for editorial scraping and PREP analysis.

``GET /api/scrape`` returns the editorial list (no ``url``) or one
editorial with its PREP analysis (with ``url``). Saved analyses are
managed under ``/api/saved``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from prepmaster.editorial import Editorial
from prepmaster.editorial.scrapers import get_source
from prepmaster.editorial.sites import UnknownSiteError
from prepmaster.prep import AiPrepAnalysis
from prepmaster.prep.classifier import analysis_payload

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    from prepmaster.storage.saved import SavedAnalyses
    await SavedAnalyses.shutdown()


app = FastAPI(title="PREP Master", lifespan=lifespan)

SCRAPE_ERROR_MESSAGE = "사설을 가져오는데 실패했습니다. 잠시 후 다시 시도해주세요."


def _get_saved():
    from prepmaster.storage.saved import SavedAnalyses
    return SavedAnalyses.get_instance()


def _error(message: str, details: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message, "details": details}, status_code=status_code)


# ------------------------------------------------------------------
# Scraping
# ------------------------------------------------------------------


@app.get("/api/scrape")
async def scrape(url: str | None = Query(None), site: str | None = Query(None)):
    try:
        source = get_source(site)
    except UnknownSiteError as exc:
        return _error(SCRAPE_ERROR_MESSAGE, str(exc), 400)

    try:
        if not url:
            editorials = await asyncio.to_thread(source.fetch_list)
            return {"editorials": [item.to_dict() for item in editorials]}

        editorial = await asyncio.to_thread(source.fetch_detail, url)
        return analysis_payload(editorial)
    except Exception as exc:
        logger.exception("Scraping error")
        return _error(SCRAPE_ERROR_MESSAGE, str(exc) or type(exc).__name__, 500)


# ------------------------------------------------------------------
# Saved analyses
# ------------------------------------------------------------------


@app.get("/api/saved")
async def list_saved():
    items = await _get_saved().all()
    return {"saved": [item.to_dict() for item in items]}


@app.post("/api/saved")
async def save_analysis(request: Request):
    try:
        body = await request.json()
    except json.JSONDecodeError as exc:
        return _error("저장할 분석이 없습니다.", str(exc), 400)
    if not isinstance(body, dict) or not body.get("editorial") or not body.get("aiAnalysis"):
        return _error("저장할 분석이 없습니다.", "editorial and aiAnalysis are required", 400)
    if not isinstance(body["editorial"], dict) or not isinstance(body["aiAnalysis"], dict):
        return _error("저장할 분석이 없습니다.", "editorial and aiAnalysis must be objects", 400)

    saved = await _get_saved().save(
        Editorial.from_dict(body["editorial"]),
        AiPrepAnalysis.from_dict(body["aiAnalysis"]),
    )
    return JSONResponse(saved.to_dict(), status_code=201)


@app.delete("/api/saved/{analysis_id}")
async def delete_saved(analysis_id: str):
    if not await _get_saved().delete(analysis_id):
        return _error("저장된 분석을 찾을 수 없습니다.", f"No saved analysis {analysis_id}", 404)
    return {"deleted": analysis_id}


@app.get("/api/saved/check")
async def check_saved(link: str = Query(...)):
    return {"link": link, "saved": await _get_saved().is_saved(link)}


@app.get("/health")
async def health():
    return {"status": "ok"}
