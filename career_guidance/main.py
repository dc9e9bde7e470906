import logging

from career_guidance import config
from career_guidance.app import create_app

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("career-guidance")

app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting on port %s", config.PORT)
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
