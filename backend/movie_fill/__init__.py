# backend/movie_fill/__init__.py
"""
Notion Movie Fill backend package.

This package contains:
- main: FastAPI application entrypoint
- fill: webhook endpoint and the fill pipeline
- notion: Notion page read / update client
- omdb: OMDb metadata client
- text: plot / feature / release date transformers
"""
