from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from .config import settings
from .log import setup_logging
from .routes import auth, categories, pages

app = FastAPI(title="Admin Console")
app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(categories.router)

@app.on_event("startup")
def on_startup():
    setup_logging(settings.log_level, use_colors=settings.log_colors)
