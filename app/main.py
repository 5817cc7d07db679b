from contextlib import asynccontextmanager
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from app.api.error_handlers import register_exception_handlers
from app.api.user_routes import user_router
from app.core.config import get_settings
from app.core.db import create_tables, engine, make_session_factory
from app.core.logging import setup_logging


def create_app(bind: AsyncEngine = engine) -> FastAPI:
    setup_logging(get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await create_tables(bind)
        yield
        await bind.dispose()

    app = FastAPI(title="Users CRUD", lifespan=lifespan)
    # get_db abre as sessões a partir daqui
    app.state.session_factory = make_session_factory(bind)
    app.include_router(user_router)
    register_exception_handlers(app)
    return app


app = create_app()


#execute a applicação com o comando: 'uvicorn app.main:app --reload'  na raiz do projeto
#em test: 'set APP_ENV=test && uvicorn app.main:app --reload' na raiz do projeto
#alterar o APP_ENV para o ambiente desejado de acordo com os arquivos .env existentes
