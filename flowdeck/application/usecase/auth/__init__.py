"""Authentication use cases."""

from .login import GoogleLoginRequest, GoogleLoginResponse, GoogleLoginUseCase
from .start_login import OAuthStartResponse, StartGoogleLoginUseCase

__all__ = [
    "GoogleLoginRequest",
    "GoogleLoginResponse",
    "GoogleLoginUseCase",
    "OAuthStartResponse",
    "StartGoogleLoginUseCase",
]
