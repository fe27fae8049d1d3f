# catalog_api/clients/posts.py
"""
Client for the public JSONPlaceholder posts API.

A single instance is built at import time and shared by every request;
httpx.Client is safe to use from the threadpool that runs sync handlers.
"""

import logging
from typing import List, Optional

import httpx

from catalog_api.models.posts import PostOut

logger = logging.getLogger(__name__)

POSTS_BASE_URL = "https://jsonplaceholder.typicode.com"


class PostsClient:
    def __init__(
        self,
        base_url: str = POSTS_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.Client(base_url=base_url, transport=transport)

    def list_posts(self) -> List[PostOut]:
        """
        GET /posts upstream and return the array as-is.

        Connection errors, timeouts and non-2xx answers are raised to the caller.
        """
        response = self._client.get("/posts")
        logger.info("GET %s/posts -> %s", self.base_url, response.status_code)
        response.raise_for_status()

        return [PostOut.model_validate(item) for item in response.json()]

    def close(self) -> None:
        self._client.close()


posts_client = PostsClient()
