# catalog_api/api/posts.py

from typing import List

from fastapi import APIRouter, Depends

from catalog_api.clients.posts import PostsClient, posts_client
from catalog_api.models.posts import PostOut

router = APIRouter(prefix="/posts", tags=["posts"])


def get_posts_client() -> PostsClient:
    return posts_client


@router.get("", response_model=List[PostOut])
def list_posts(
    client: PostsClient = Depends(get_posts_client),
) -> List[PostOut]:
    """
    Proxy the upstream /posts listing.
    """
    return client.list_posts()
