import os

import uvicorn

from observer.core.app import app  # noqa: F401
from observer.core.config import settings

if __name__ == "__main__":
    PORT = os.getenv("PORT", settings.PORT)
    reload = settings.APP_ENV == "development"
    uvicorn.run("observer.core.app:app", host=settings.HOST, port=int(PORT), reload=reload)
