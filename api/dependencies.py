"""Request dependencies shared by the routers."""
import logging
import secrets

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from api.services.content import ContentService
from shared.config import SiteConfig
from storage.article_store import ArticleStore

logger = logging.getLogger(__name__)

AUTH_REALM = "simpleblog"

security = HTTPBasic(realm=AUTH_REALM)


def get_config(request: Request) -> SiteConfig:
    """Dependency for the process-wide site configuration."""
    return request.app.state.config


def get_store(request: Request) -> ArticleStore:
    """Dependency for the shared article store."""
    return request.app.state.store


def get_content_service(
    config: SiteConfig = Depends(get_config),
    store: ArticleStore = Depends(get_store)
) -> ContentService:
    """Dependency for the page builder."""
    return ContentService(config, store)


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def require_admin(
    credentials: HTTPBasicCredentials = Depends(security),
    config: SiteConfig = Depends(get_config)
) -> str:
    """Check HTTP Basic credentials against the configured admin account."""
    username_ok = _matches(credentials.username, config.admin_username)
    password_ok = _matches(credentials.password, config.admin_password)
    if not (username_ok and password_ok):
        logger.warning(f"Rejected article submission from user {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'}
        )
    return credentials.username
