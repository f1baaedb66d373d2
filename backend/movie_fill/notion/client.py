# backend/movie_fill/notion/client.py

"""
Notion API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, Optional

import httpx

from movie_fill.errors import UpstreamError

from .config import NotionConfig, get_notion_config


class NotionClientError(UpstreamError):
    """Notion クライアント全般の例外。"""


class NotionAuthError(NotionClientError):
    """認証・権限関連のエラー。"""


class NotionAPIError(NotionClientError):
    """その他 Notion API 呼び出し時のエラー。"""


class NotionNotFoundError(NotionAPIError):
    """ページが存在しない、またはインテグレーションに共有されていない。"""


class NotionClient:
    """
    Notion API の薄いラッパークライアント。

    - ページの取得
    - ページプロパティの更新
    """

    def __init__(
        self,
        config: Optional[NotionConfig] = None,
        timeout: float = 10.0,
    ) -> None:
        self.config = config or get_notion_config()
        self._timeout = timeout

    def _build_headers(self) -> Dict[str, str]:
        """
        Notion API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        HTTP レスポンスコードに応じて適切な例外を投げる。
        """
        if response.status_code == 401:
            raise NotionAuthError("Unauthorized. Check NOTION_TOKEN.")
        if response.status_code == 403:
            raise NotionAuthError("Forbidden. Check Notion integration permissions.")
        if response.status_code == 404:
            raise NotionNotFoundError(
                "Notion page not found. Share the page with the integration."
            )
        if response.status_code >= 400:
            raise NotionAPIError(
                f"Notion API error: {response.status_code} {response.text}"
            )

    def retrieve_page(self, page_id: str) -> Dict[str, Any]:
        """
        ページオブジェクトを 1 件取得する。

        返り値は Notion API の生のページオブジェクト。
        タイトル抽出などは properties.py のヘルパーで行う。
        """
        url = f"{self.config.api_base_url}/pages/{page_id}"

        try:
            response = httpx.get(
                url,
                headers=self._build_headers(),
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise NotionAPIError("Notion API returned a non-JSON response.") from exc

        if not isinstance(data, dict):
            raise NotionAPIError("Unexpected Notion API response format: page is not an object.")

        return data

    def update_page_properties(self, page_id: str, properties: Dict[str, Any]) -> None:
        """
        ページのプロパティを更新する。

        部分適用は行わない。Notion 側で成功 / 失敗のどちらかになる。
        """
        url = f"{self.config.api_base_url}/pages/{page_id}"

        body = {"properties": properties}

        try:
            response = httpx.patch(
                url,
                headers=self._build_headers(),
                json=body,
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to update Notion page: {exc}") from exc

        self._raise_for_status(response)
