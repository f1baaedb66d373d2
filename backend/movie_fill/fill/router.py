# backend/movie_fill/fill/router.py

import json
import logging
from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from movie_fill.errors import MovieFillError

from .schemas import MovieFillErrorResponse, MovieFillResponse
from .service import MovieFillService, resolve_page_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["movie-fill"])


@lru_cache()
def get_movie_fill_service() -> MovieFillService:
    """
    環境変数の設定で組み立てた MovieFillService を返す。

    テストでは app.dependency_overrides で差し替える。
    """
    return MovieFillService()


def _parse_body(raw: bytes) -> Any:
    # 壊れた JSON / 空ボディは空オブジェクト扱い（page_id はヘッダーで来るかもしれない）
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        return {}


@router.post(
    "/notion-movie-fill",
    response_model=MovieFillResponse,
    responses={500: {"model": MovieFillErrorResponse}},
    summary="Notion ページに OMDb の映画情報を書き込む",
    description=(
        "Notion ボタンの Webhook から呼ばれる。JSON ボディの page_id "
        "または X-Notion-Page-Id ヘッダーでページを指定する。"
    ),
)
async def notion_movie_fill(
    request: Request,
    x_notion_page_id: Optional[str] = Header(None),
    service: MovieFillService = Depends(get_movie_fill_service),
):
    """
    映画情報フィルのエンドポイント。

    - 正常系: 200 {"ok": true, "title": ..., "updated": [...]}
    - 異常系: 種別にかかわらず 500 {"ok": false, "error": メッセージ}
    """
    try:
        body = _parse_body(await request.body())
        page_id = resolve_page_id(body, x_notion_page_id)
        result = await run_in_threadpool(service.fill, page_id)
    except MovieFillError as exc:
        logger.warning("Movie fill failed: %s", exc)
        return _error_response(str(exc))
    except Exception as exc:  # noqa: BLE001
        # 想定外の例外もメッセージだけ返す（詳細はログ側で確認）
        logger.exception("Unexpected error during movie fill.")
        return _error_response(str(exc) or exc.__class__.__name__)

    return MovieFillResponse(title=result.title, updated=result.updated)


def _error_response(message: str) -> JSONResponse:
    payload = MovieFillErrorResponse(error=message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=payload.model_dump(),
    )
