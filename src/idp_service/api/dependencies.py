from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends

from idp_service.agent.llm import LLMClient
from idp_service.auth.dependencies import get_current_user, optional_auth
from idp_service.auth.schemas import UserInfo
from idp_service.config.settings import Settings, get_settings


@lru_cache
def get_llm_client() -> LLMClient:
    """Process-wide LLM client built from settings."""
    return LLMClient.from_settings(get_settings())


# Type aliases for clean injection
AppSettings = Annotated[Settings, Depends(get_settings)]
CurrentUser = Annotated[UserInfo, Depends(get_current_user)]
OptionalUser = Annotated[Optional[UserInfo], Depends(optional_auth)]
LLM = Annotated[LLMClient, Depends(get_llm_client)]
