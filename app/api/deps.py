from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from app.core.security import decode_access_token
from app.schemas.operator import Operator

# auto_error=False: a missing header must be 401, not HTTPBearer's default 403
security = HTTPBearer(auto_error=False)


def get_current_operator(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Operator:
    """
    Resolve the calling operator from the bearer token.
    Every campaign and customer query is scoped to the returned operator id.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    operator_id: Optional[str] = payload.get("sub")
    if not operator_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Operator(id=str(operator_id), email=payload.get("email"))
