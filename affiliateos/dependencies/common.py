"""
FastAPI dependencies for dependency injection.

Long-lived collaborators are built once by the lifespan and stored on
`app.state`; the dependencies in this package hand them to endpoints. Tests
replace them through `app.dependency_overrides`.
"""

from typing import Annotated

from fastapi import Depends, Request

from affiliateos.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
