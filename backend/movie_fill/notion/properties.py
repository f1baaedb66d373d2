# backend/movie_fill/notion/properties.py

"""
Notion のプロパティ値の読み書きヘルパー。

- タイトル（rich title）からのプレーンテキスト抽出
- rich_text / multi_select / date / status の更新値の組み立て
- ステータスプロパティの有無チェック
"""

from typing import Any, Dict, List, Optional


def _fragment_text(fragment: Any) -> str:
    if isinstance(fragment, dict):
        text = fragment.get("plain_text")
        if isinstance(text, str):
            return text
    return ""


def extract_title(page: Dict[str, Any], property_name: str) -> str:
    """
    ページのタイトルプロパティからプレーンテキストを取り出す。

    先頭フラグメントの plain_text を優先し、空なら全フラグメントを連結する。
    前後の空白は除去して返す。取れなければ空文字。
    """
    properties = page.get("properties") or {}
    prop = properties.get(property_name) or {}
    if not isinstance(prop, dict):
        return ""

    fragments = prop.get("title")
    if not isinstance(fragments, list) or not fragments:
        return ""

    text = _fragment_text(fragments[0]) or "".join(
        _fragment_text(fragment) for fragment in fragments
    )
    return text.strip()


def supports_status(page: Dict[str, Any], property_name: Optional[str]) -> bool:
    """
    ページが status 型のプロパティ property_name を持っているかどうか。
    """
    if not property_name:
        return False

    properties = page.get("properties") or {}
    prop = properties.get(property_name)
    return isinstance(prop, dict) and prop.get("type") == "status"


def as_rich_text(content: str) -> Dict[str, Any]:
    return {"rich_text": [{"type": "text", "text": {"content": content}}]}


def as_multi_select(names: List[str]) -> Dict[str, Any]:
    # 重複除去・ソートはしない（入力順のまま）
    return {"multi_select": [{"name": name} for name in names]}


def as_date(iso: Optional[str]) -> Optional[Dict[str, Any]]:
    if not iso:
        return None
    return {"date": {"start": iso}}


def as_status(name: str) -> Dict[str, Any]:
    return {"status": {"name": name}}


def compact_properties(properties: Dict[str, Optional[Dict[str, Any]]]) -> Dict[str, Any]:
    """
    値が None のプロパティを取り除く。

    None を送ると Notion 側で値のクリアになってしまうため、
    「変更なし」はキーごと送らないことで表現する。
    """
    return {name: value for name, value in properties.items() if value is not None}
