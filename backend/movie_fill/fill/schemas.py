# backend/movie_fill/fill/schemas.py

"""
/api/notion-movie-fill のレスポンス定義。
"""

from typing import List

from pydantic import BaseModel, Field


class MovieFillResult(BaseModel):
    """フィル処理 1 回分の結果。"""

    title: str = Field(..., description="Notion ページから読んだタイトル")
    updated: List[str] = Field(
        default_factory=list,
        description="更新リクエストに含めたプロパティ名（送信順）",
    )


class MovieFillResponse(MovieFillResult):
    """成功時のレスポンス。"""

    ok: bool = True


class MovieFillErrorResponse(BaseModel):
    """失敗時のレスポンス。エラー種別は公開せずメッセージのみ返す。"""

    ok: bool = False
    error: str
