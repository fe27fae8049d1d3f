from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog_api.api.posts import router as posts_router
from catalog_api.api.products import router as products_router
from catalog_api.clients.posts import posts_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    posts_client.close()


app = FastAPI(
    title="Catalog API",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(products_router)
app.include_router(posts_router)
