"""Client for the comment board HTTP API."""

from commentboard.client.api_client import (
    CommentBoardAPIError,
    CommentBoardClient,
    optimistic_comment,
)

__all__ = ['CommentBoardAPIError', 'CommentBoardClient', 'optimistic_comment']
