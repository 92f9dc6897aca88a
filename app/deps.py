"""
Dependencies module - reusable FastAPI dependencies for route handlers.

- get_authorization_code: reads the `code` parameter from the query
  string or a form body
- get_google_auth_client: builds the Google OAuth client (overridden in tests)
"""

from fastapi import HTTPException, Request, status

from app.environments.google import GoogleAuthClient

# Content types whose body may carry the `code` form field
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_authorization_code(request: Request) -> str:
    """
    Extract the authorization code from the request.

    The query string wins; a form body is consulted only when the query
    has no `code`. An empty value is returned as-is (Google rejects it).

    Raises:
        HTTPException 400: `code` is in neither place
    """
    code = request.query_params.get("code")
    if code is not None:
        return code

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        form_code = form.get("code")
        if isinstance(form_code, str):
            return form_code

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Missing required parameter: code",
    )


def get_google_auth_client() -> GoogleAuthClient:
    """Build a Google OAuth client from the global settings."""
    return GoogleAuthClient()
