# backend/movie_fill/omdb/client.py

"""
OMDb API との通信を担当するクライアントモジュール。
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from movie_fill.errors import MissingCredentialError, ProviderNotFoundError, UpstreamError

from .config import OmdbSettings, get_omdb_settings
from .schemas import MovieMetadata

logger = logging.getLogger(__name__)

# OMDb は該当なしの場合に Response: "False" を返す
NOT_FOUND_SENTINEL = "False"
NOT_FOUND_FALLBACK_MESSAGE = "OMDb not found"


class OmdbClientError(UpstreamError):
    """OMDb クライアント全般の基底例外。"""


class OmdbConnectionError(OmdbClientError):
    """接続エラー・タイムアウト時の例外。"""


class OmdbAPIError(OmdbClientError):
    """HTTP ステータスやレスポンス形式が想定外だった場合の例外。"""


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if isinstance(value, str):
        return value
    return ""


def split_genres(raw: str) -> List[str]:
    """
    "Action, Thriller" 形式のジャンル文字列をリストに分割する。

    各要素は前後の空白を除去し、空要素は捨てる。順序は維持する。
    """
    return [genre.strip() for genre in (raw or "").split(",") if genre.strip()]


class OmdbClient:
    """
    OMDb API への HTTP クライアント。

    タイトル 1 件につき GET を 1 回だけ行う。リトライやあいまい検索はしない。
    """

    def __init__(
        self,
        settings: Optional[OmdbSettings] = None,
        timeout: float = 10.0,
    ) -> None:
        self._settings = settings or get_omdb_settings()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def api_key(self) -> str:
        return self._settings.api_key

    def fetch_movie(self, title: str) -> MovieMetadata:
        """
        タイトルで作品を検索し、MovieMetadata を返す。

        :raises MissingCredentialError: OMDB_API_KEY が未設定の場合（通信前に判定）。
        :raises ProviderNotFoundError: OMDb が Response=False を返した場合。
        :raises OmdbConnectionError: 接続エラーやタイムアウト時。
        :raises OmdbAPIError: JSON でない / 4xx・5xx のレスポンスの場合。
        """
        if not self.api_key:
            raise MissingCredentialError("OMDB_API_KEY")

        params = {"apikey": self.api_key, "t": title, "plot": "full"}

        try:
            response = httpx.get(self.base_url, params=params, timeout=self._timeout)
        except httpx.RequestError as exc:
            raise OmdbConnectionError(f"Failed to call OMDb API: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise OmdbAPIError(
                f"OMDb API returned a non-JSON response: status_code={response.status_code}"
            ) from exc

        if not isinstance(data, dict):
            raise OmdbAPIError("Unexpected OMDb API response format: body is not an object.")

        # 無効な API キーも 401 + Response=False で返ってくるので、ステータスより先に見る
        if data.get("Response") == NOT_FOUND_SENTINEL:
            message = _text(data, "Error") or NOT_FOUND_FALLBACK_MESSAGE
            logger.info("OMDb returned no match. title=%s error=%s", title, message)
            raise ProviderNotFoundError(message)

        if response.status_code >= 400:
            raise OmdbAPIError(f"OMDb API error: status_code={response.status_code}")

        return MovieMetadata(
            director=_text(data, "Director"),
            plot=_text(data, "Plot"),
            genres=split_genres(_text(data, "Genre")),
            released=_text(data, "Released"),
            writers=_text(data, "Writer"),
            actors=_text(data, "Actors"),
        )
