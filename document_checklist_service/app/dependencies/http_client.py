from fastapi import HTTPException, Request
import httpx

async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Shared httpx.AsyncClient created by the startup handler. Requests served
    before startup (or after shutdown) get a 503 instead of an AttributeError.
    """
    http_client = getattr(request.app.state, "http_client", None)
    if http_client is None or http_client.is_closed:
        raise HTTPException(status_code=503, detail="Outbound HTTP client is not available.")
    return http_client
