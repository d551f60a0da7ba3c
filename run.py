"""Entry point for the cardcrm service."""

import uvicorn

from cardcrm.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "cardcrm.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower(),
    )
