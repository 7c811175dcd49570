"""Token provider interface used by the auth dependencies."""

from abc import ABC, abstractmethod

from ..schemas import TokenPayload, UserInfo


class IAuthProvider(ABC):
    """
    Turns a bearer token into a user.

    The dependencies in `auth.dependencies` only call `get_user_info`.
    """

    @abstractmethod
    def verify_token(self, token: str) -> TokenPayload:
        """
        Check the signature and registered claims of `token`.

        Raises:
            TokenExpiredError: If `exp` is in the past
            InvalidTokenError: For any other rejected token
        """

    @abstractmethod
    def get_user_info(self, token: str) -> UserInfo:
        ...

    @abstractmethod
    def get_provider_name(self) -> str:
        ...

    def validate_configuration(self) -> None:
        """Raise ProviderConfigError when the provider cannot work as configured."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.get_provider_name()!r})"
