# backend/movie_fill/notion/__init__.py

"""
Notion 連携用モジュール群。

主な責務:
- Notion API からページを 1 件読み取る
- タイトルプロパティからプレーンテキストを取り出す
- 映画情報をプロパティ値に変換してページを更新する
"""
