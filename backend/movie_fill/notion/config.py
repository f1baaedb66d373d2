# backend/movie_fill/notion/config.py

"""
Notion 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from movie_fill.utils.config import get_env

DEFAULT_TITLE_PROPERTY = "제목"
DEFAULT_STATUS_PROPERTY = "상태"
DEFAULT_STATUS_DONE = "완료"


@dataclass(frozen=True)
class NotionConfig:
    """Notion API 用の設定値コンテナ。"""

    api_key: str
    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"
    title_property: str = DEFAULT_TITLE_PROPERTY
    # 空 / None の場合はステータス更新を行わない
    status_property: Optional[str] = DEFAULT_STATUS_PROPERTY
    status_done: str = DEFAULT_STATUS_DONE


@lru_cache()
def get_notion_config() -> NotionConfig:
    """
    環境変数から Notion 設定を読み込む。

    必須（ただし未設定チェックは行わない。Notion 側で 401 になる）:
      - NOTION_TOKEN

    任意:
      - NOTION_API_BASE_URL    (デフォルト: https://api.notion.com/v1)
      - NOTION_API_VERSION     (デフォルト: 2022-06-28)
      - NOTION_TITLE_PROPERTY  (デフォルト: 제목)
      - NOTION_STATUS_PROPERTY (デフォルト: 상태。空文字で無効化)
      - NOTION_STATUS_DONE     (デフォルト: 완료)
    """
    api_key = get_env("NOTION_TOKEN", default="")

    api_base_url = get_env(
        "NOTION_API_BASE_URL",
        default="https://api.notion.com/v1",
    )
    api_version = get_env(
        "NOTION_API_VERSION",
        default="2022-06-28",
    )
    title_property = get_env(
        "NOTION_TITLE_PROPERTY",
        default=DEFAULT_TITLE_PROPERTY,
    )

    # 空文字は「ステータス更新なし」として扱う
    status_property = get_env(
        "NOTION_STATUS_PROPERTY",
        default=DEFAULT_STATUS_PROPERTY,
        keep_empty=True,
    )

    status_done = get_env(
        "NOTION_STATUS_DONE",
        default=DEFAULT_STATUS_DONE,
    )

    return NotionConfig(
        api_key=api_key,
        api_base_url=api_base_url.rstrip("/"),
        api_version=api_version,
        title_property=title_property,
        status_property=status_property or None,
        status_done=status_done,
    )
