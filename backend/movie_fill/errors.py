# backend/movie_fill/errors.py

"""
映画情報フィル処理全体で使う例外階層。

どの例外もルーターまでそのまま伝播し、500 + {"ok": false, "error": ...}
として返される。種別はクライアントには公開しない。
"""


class MovieFillError(RuntimeError):
    """フィル処理全般の基底例外。"""


class MissingIdentifierError(MovieFillError):
    """リクエストから page_id を解決できなかった。"""

    def __init__(self) -> None:
        super().__init__(
            "page_id is missing (use JSON body.page_id or the X-Notion-Page-Id header)."
        )


class EmptyTitleError(MovieFillError):
    """Notion ページのタイトルプロパティが空。"""

    def __init__(self, property_name: str) -> None:
        super().__init__(f"Notion page property '{property_name}' is empty.")
        self.property_name = property_name


class MissingCredentialError(MovieFillError):
    """外部 API の認証情報が設定されていない。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not configured.")
        self.name = name


class ProviderNotFoundError(MovieFillError):
    """メタデータ提供元が「該当なし」を返した。"""


class UpstreamError(MovieFillError):
    """Notion / OMDb との通信・認証・ステータス由来のエラー。"""
