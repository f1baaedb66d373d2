# backend/movie_fill/text/transformers.py
"""
OMDb の映画情報を Notion 用のテキストに加工する関数群。

- あらすじを「~하다」体の短い要約に書き換える（文法的に正しい変換ではない）
- 監督 / ジャンルから「특징」（特徴）文字列を組み立てる
- 自由書式の公開日を ISO-8601 の日付に変換する
"""

import re
from datetime import date, datetime
from typing import List, Optional

SUMMARY_MAX_LENGTH = 360
SUMMARY_KEEP_LENGTH = 356
ELLIPSIS = "…"

ENDING = "하다"
EMPTY_PLOT_SUMMARY = "작품 정보가 부족하여 간단 요약을 제공하지 못하다."

DIRECTOR_LABEL = "연출"
GENRE_LABEL = "장르 결합"
FIXED_FEATURE = "리듬감 있는 전개"
FEATURE_SEPARATOR = " / "
MAX_FEATURE_GENRES = 3

_WHITESPACE_RE = re.compile(r"\s+")
_TERMINATOR_RE = re.compile(r"[.!?]\s+")
_POLITE_ENDING = "입니다"
_ENDING_RE = re.compile(ENDING + r"[.?!…]?\Z")

# OMDb は "20 Jun 1988" 形式。その他よく見る書式も受け付ける。
_DATE_FORMATS = (
    "%d %b %Y",
    "%Y-%m-%d",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y.%m.%d",
    "%b %Y",
    "%B %Y",
    "%Y",
)

# "Jun 20 1988 12:00" のような末尾の時刻
_TRAILING_TIME_RE = re.compile(r"[ T]\d{1,2}:\d{2}(:\d{2})?( ?[AaPp][Mm])?\Z")


def summarize_plot(plot: str) -> str:
    """
    あらすじを「~하다」で終わる 360 文字以内の要約にする。

    1. 空白の連続を 1 つのスペースに畳む
    2. 「. ! ?」+ 空白 を「하다. 」に置換、「입니다」を「하다」に置換
    3. 360 文字を超える場合は 356 文字で切って「…」を付ける
    4. 「하다」（+ 終端記号 1 つ）で終わっていなければ「하다.」を付ける
    """
    if not plot:
        return EMPTY_PLOT_SUMMARY

    cleaned = _WHITESPACE_RE.sub(" ", plot)
    cleaned = _TERMINATOR_RE.sub(ENDING + ". ", cleaned)
    cleaned = cleaned.replace(_POLITE_ENDING, ENDING)

    if len(cleaned) > SUMMARY_MAX_LENGTH:
        out = cleaned[:SUMMARY_KEEP_LENGTH] + ELLIPSIS
    else:
        out = cleaned

    if _ENDING_RE.search(out):
        return out
    return out + ENDING + "."


def build_features(director: str, genres: Optional[List[str]]) -> str:
    """監督・ジャンルと固定句から「특징」文字列を作る。"""
    clauses: List[str] = []
    if director:
        clauses.append(f"{DIRECTOR_LABEL}: {director}")
    if genres:
        clauses.append(f"{GENRE_LABEL}: {', '.join(genres[:MAX_FEATURE_GENRES])}")
    clauses.append(FIXED_FEATURE)
    return FEATURE_SEPARATOR.join(clauses)


def build_crew_line(writers: str, actors: str) -> str:
    return f"각본: {writers} / 출연: {actors}"


def _parse_date(text: str) -> Optional[date]:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        # ISO 形式（時刻・タイムゾーン付きを含む）
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    without_time = _TRAILING_TIME_RE.sub("", text)
    if without_time != text:
        return _parse_date(without_time)
    return None


def parse_released_to_iso(released: str) -> Optional[str]:
    """
    公開日テキストを "YYYY-MM-DD" に変換する。

    空文字・"N/A"・解釈できない文字列の場合は None（エラーにはしない）。
    時刻とタイムゾーンは捨て、書かれている暦日をそのまま使う。
    """
    text = _WHITESPACE_RE.sub(" ", released or "").strip()
    if not text:
        return None

    parsed = _parse_date(text)
    if parsed is None:
        return None
    return parsed.isoformat()
