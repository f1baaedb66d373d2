# backend/movie_fill/omdb/config.py

from dataclasses import dataclass
from functools import lru_cache

from movie_fill.utils.config import get_env


@dataclass(frozen=True)
class OmdbSettings:
    """
    OMDb API 関連の設定値。

    api_key が空でも生成はできる。未設定のチェックは
    OmdbClient.fetch_movie() がネットワーク呼び出しの前に行う。
    """

    api_key: str
    base_url: str = "https://www.omdbapi.com/"


@lru_cache()
def get_omdb_settings() -> OmdbSettings:
    """
    OMDb 設定値を環境変数から読み出す。

    必須:
      - OMDB_API_KEY（未設定時は取得処理で MissingCredentialError）

    任意:
      - OMDB_API_BASE_URL（デフォルト https://www.omdbapi.com/）
    """
    api_key = get_env("OMDB_API_KEY", default="")
    base_url = get_env(
        "OMDB_API_BASE_URL",
        default="https://www.omdbapi.com/",
    )

    return OmdbSettings(api_key=api_key, base_url=base_url)
