from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from config import APP_TITLE, APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from Database.db import get_db, init_db
from Routes import kpi, products


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()  # cria todas as tabelas
    logger.info("Tabelas verificadas, API pronta")
    yield


app = FastAPI(
    title=APP_TITLE,
    description="API do catálogo de produtos da Holy Pepperoni",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products.router)
app.include_router(kpi.router)


@app.get("/")
def root():
    return {"message": "API PizzaDB está funcionando!"}


@app.get("/api/test-connection")
def test_connection(db: Session = Depends(get_db)):
    """Verifica se o banco de dados responde"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "success", "message": "Conexão com o banco de dados OK"}
    except SQLAlchemyError as e:
        logger.error(f"Falha ao conectar no banco de dados: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Falha ao conectar no banco de dados", "details": str(e)},
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8080, reload=False)
