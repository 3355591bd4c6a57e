from typing import Annotated, Optional
import hmac
from fastapi import Header, HTTPException
from ..core.config import get_settings

async def require_admin(
    x_admin_token: Annotated[Optional[str], Header()] = None,
) -> None:
    # Sin ADMIN_TOKEN configurado el endpoint queda abierto (desarrollo local)
    expected = get_settings().ADMIN_TOKEN
    if not expected:
        return
    if not x_admin_token or not hmac.compare_digest(x_admin_token.strip(), expected):
        raise HTTPException(status_code=401, detail="Missing or invalid admin token")
