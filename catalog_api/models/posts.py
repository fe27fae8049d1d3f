# catalog_api/models/posts.py

from pydantic import BaseModel, Field


class PostOut(BaseModel):
    # upstream uses camelCase for the author id; keep it on the way out
    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str

    class Config:
        populate_by_name = True
