import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

import config
from application.use_cases import TaskUseCases
from infrastructure.database import Database
from interfaces.api import router as task_router
from interfaces.error_handlers import register_error_handlers

# --- Basic Setup ---
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the app around one Database; without one, it is opened at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not hasattr(app.state, "use_cases"):
            app.state.use_cases = TaskUseCases(Database(config.TODO_DB_PATH))
        logger.info(f"To-Do List started with database {app.state.use_cases.db.db_name}")
        yield
        logger.info("To-Do List shutting down")

    app = FastAPI(title="To-Do List", lifespan=lifespan)
    if database is not None:
        app.state.use_cases = TaskUseCases(database)

    app.include_router(task_router)
    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=os.path.join(BASE_DIR, "static")), name="static")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def index(request: Request):
        return templates.TemplateResponse(request, "index.html")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Listening on http://localhost:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
