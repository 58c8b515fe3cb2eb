import uvicorn
from gateway.app.core.config import settings

if __name__ == "__main__":
    # PORT is read from the environment by Settings, matching Cloud Run's contract
    uvicorn.run(
        "gateway.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
