# backend/movie_fill/omdb/schemas.py

"""
OMDb から取得した映画情報を内部で扱うためのスキーマ定義。
"""

from typing import List

from pydantic import BaseModel, Field


class MovieMetadata(BaseModel):
    """
    OMDb の 1 作品分のメタデータ。

    1 リクエストの間だけ存在し、永続化はしない。
    欠損フィールドはすべて空文字（genres は空リスト）になる。
    """

    director: str = Field("", description="監督（OMDb: Director）")
    plot: str = Field("", description="あらすじ（OMDb: Plot, plot=full）")
    genres: List[str] = Field(
        default_factory=list,
        description="ジャンル名のリスト（OMDb: Genre をカンマ分割、順序維持）",
    )
    released: str = Field("", description="公開日の自由書式テキスト（OMDb: Released）")
    writers: str = Field("", description="脚本（OMDb: Writer）")
    actors: str = Field("", description="出演（OMDb: Actors）")
