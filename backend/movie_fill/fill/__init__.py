# backend/movie_fill/fill/__init__.py

"""
Notion ボタン（Webhook）→ OMDb 検索 → Notion ページ更新 のパイプライン。
"""
