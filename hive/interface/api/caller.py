"""Resolution of the authenticated caller."""

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.domain.error import AuthenticationError
from hive.domain.model import User
from hive.interface.error import unauthenticated


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def authenticate(
    authorization: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> User:
    """Resolve the request's bearer credential to a team-assigned user.

    Args:
        authorization: Raw Authorization header
        get_current_user_use_case: Caller resolution use case from DI

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 if the credential is missing or invalid
    """
    try:
        return await get_current_user_use_case.resolve(bearer_token(authorization))
    except AuthenticationError as e:
        raise unauthenticated() from e
