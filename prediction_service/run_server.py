"""
Run the Prediction Service
==========================

Start: python -m prediction_service.run_server
Stop:  Ctrl+C

Environment:
- HUGGINGFACE_API_KEY enables classifier-enhanced confidence
- USE_REDIS / REDIS_HOST / REDIS_PORT select the prediction store
"""

import logging

import uvicorn

from .app import create_app
from .config import Settings


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    print("=" * 60)
    print("🏥 Health Prediction Service - Starting Server")
    print("=" * 60)
    print(f"🤖 Classifier enhancement: {'on' if settings.huggingface_api_key else 'off'}")
    print("🔗 API Docs: http://localhost:8000/docs")
    print("=" * 60)

    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
