# backend/movie_fill/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /api/notion-movie-fill エンドポイントを公開する（Notion ボタンの Webhook 先）
- /health エンドポイントを公開する
"""

from fastapi import FastAPI

from movie_fill.fill.router import router as movie_fill_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 映画情報フィルエンドポイント (/api/notion-movie-fill)
    - ヘルスチェックエンドポイント (/health)
    """
    app = FastAPI(title="Notion Movie Fill")

    # ルーター登録
    app.include_router(movie_fill_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
