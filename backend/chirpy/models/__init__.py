from chirpy.models.chirp import Chirp
from chirpy.models.refresh_token import RefreshToken
from chirpy.models.user import User

__all__ = [
    "Chirp",
    "RefreshToken",
    "User",
]
