# run_server.py
import uvicorn

from rfm_api.core.config import settings
from rfm_api.main import app

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
