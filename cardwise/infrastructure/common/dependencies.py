"""FastAPI dependencies shared by the HTTP routers."""

from typing import Annotated

from fastapi import Header

# Stands in for an authenticated principal; a missing or malformed header is
# rejected by request validation.
CurrentUserId = Annotated[
    int, Header(alias="X-User-Id", ge=1, description="ID of the acting user")
]
