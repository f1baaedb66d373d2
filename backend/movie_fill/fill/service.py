# backend/movie_fill/fill/service.py

"""
Notion ページ 1 件に映画情報を書き込むサービス層。

処理の流れ（すべて直列、途中で失敗したらそこで終了）:
  1. Notion ページを取得してタイトルを読む
  2. タイトルで OMDb を検索する
  3. あらすじ要約・特徴・公開日を加工する
  4. プロパティをまとめて 1 回の更新リクエストで書き込む
"""

import logging
from typing import Any, Dict, Optional

from movie_fill.errors import EmptyTitleError, MissingIdentifierError
from movie_fill.notion.client import NotionClient
from movie_fill.notion.properties import (
    as_date,
    as_multi_select,
    as_rich_text,
    as_status,
    compact_properties,
    extract_title,
    supports_status,
)
from movie_fill.omdb.client import OmdbClient
from movie_fill.omdb.schemas import MovieMetadata
from movie_fill.text.transformers import (
    build_crew_line,
    build_features,
    parse_released_to_iso,
    summarize_plot,
)

from .schemas import MovieFillResult

logger = logging.getLogger(__name__)

# 書き込み先のプロパティ名（データベース側の列名が違う場合はここを変える）
DIRECTOR_PROPERTY = "감독"
PLOT_PROPERTY = "줄거리"
FEATURES_PROPERTY = "특징"
GENRES_PROPERTY = "장르"
RELEASE_DATE_PROPERTY = "개봉일"
CREW_PROPERTY = "제작/스태프"


def resolve_page_id(body: Any, header_value: Optional[str]) -> str:
    """
    JSON ボディの page_id を優先し、無ければ X-Notion-Page-Id ヘッダーを使う。

    ボディが dict でない場合は空オブジェクト扱い。数値の page_id は文字列に変換する。
    どちらも空なら MissingIdentifierError。
    """
    from_body = body.get("page_id") if isinstance(body, dict) else None
    if isinstance(from_body, (int, float)) and not isinstance(from_body, bool) and from_body:
        from_body = str(from_body)
    if isinstance(from_body, str) and from_body.strip():
        return from_body.strip()

    from_header = (header_value or "").strip()
    if from_header:
        return from_header

    raise MissingIdentifierError()


def build_movie_properties(
    metadata: MovieMetadata,
    *,
    include_status: bool = False,
    status_property: Optional[str] = None,
    status_value: str = "",
) -> Dict[str, Any]:
    """
    MovieMetadata から Notion の更新用プロパティを組み立てる。

    公開日が解釈できない場合、そのプロパティは送らない（null も送らない）。
    """
    properties: Dict[str, Optional[Dict[str, Any]]] = {
        DIRECTOR_PROPERTY: as_rich_text(metadata.director),
        PLOT_PROPERTY: as_rich_text(summarize_plot(metadata.plot)),
        FEATURES_PROPERTY: as_rich_text(build_features(metadata.director, metadata.genres)),
        GENRES_PROPERTY: as_multi_select(metadata.genres),
        RELEASE_DATE_PROPERTY: as_date(parse_released_to_iso(metadata.released)),
        CREW_PROPERTY: as_rich_text(build_crew_line(metadata.writers, metadata.actors)),
    }

    if include_status and status_property:
        properties[status_property] = as_status(status_value)

    return compact_properties(properties)


class MovieFillService:
    """
    NotionClient / OmdbClient を組み合わせてフィル処理を行うサービス。

    - クライアントはコンストラクタで注入可能（テストではフェイクを渡す）
    - 状態は持たない。リクエストごとに fill() を 1 回呼ぶ
    """

    def __init__(
        self,
        *,
        notion_client: Optional[NotionClient] = None,
        omdb_client: Optional[OmdbClient] = None,
    ) -> None:
        self.notion_client = notion_client or NotionClient()
        self.omdb_client = omdb_client or OmdbClient()

    def fill(self, page_id: str) -> MovieFillResult:
        """
        page_id のページに映画情報を書き込み、タイトルと更新したプロパティ名を返す。

        Notion / OMDb の例外はそのまま呼び出し元へ伝播させる。
        """
        if not page_id:
            raise MissingIdentifierError()

        config = self.notion_client.config

        page = self.notion_client.retrieve_page(page_id)
        title = extract_title(page, config.title_property)
        if not title:
            raise EmptyTitleError(config.title_property)

        logger.info("Fetching movie metadata. page_id=%s title=%s", page_id, title)
        metadata = self.omdb_client.fetch_movie(title)

        include_status = supports_status(page, config.status_property)
        if config.status_property and not include_status:
            logger.info(
                "Page has no status property '%s'; skipping status update. page_id=%s",
                config.status_property,
                page_id,
            )

        properties = build_movie_properties(
            metadata,
            include_status=include_status,
            status_property=config.status_property,
            status_value=config.status_done,
        )

        self.notion_client.update_page_properties(page_id, properties)
        logger.info(
            "Notion page updated. page_id=%s properties=%s",
            page_id,
            list(properties.keys()),
        )

        return MovieFillResult(title=title, updated=list(properties.keys()))
