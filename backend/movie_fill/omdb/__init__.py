# backend/movie_fill/omdb/__init__.py

"""
OMDb（映画メタデータ提供元）連携用モジュール群。
"""
