# backend/movie_fill/utils/config.py

"""
環境変数読み取り用のユーティリティ。
Notion / OMDb の両クライアントで共通利用する。
"""

import os
from typing import Optional


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    keep_empty: bool = False,
) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: 未設定の場合に返す値
    :param keep_empty: True の場合、空文字の設定値も「設定あり」として返す
    :return: 前後の空白を除いた文字列値
    """
    value = os.getenv(name)

    if value is None:
        return default

    value = value.strip()
    if value == "" and not keep_empty:
        return default

    return value
