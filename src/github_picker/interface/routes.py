"""API routes — thin controllers that delegate to the repository browser."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Query

from github_picker.domain.exceptions import AuthenticationFailure
from github_picker.interface.dependencies import get_browser
from github_picker.interface.schemas import (
    CapabilitiesResponse,
    ErrorResponse,
    FileRequest,
    FileResponse,
    ListingResponse,
    LoginFormResponse,
    LoginResponse,
)
from github_picker.services.repository_browser import RepositoryBrowser

router = APIRouter()


@router.get("/login", response_model=LoginFormResponse)
def print_login(browser: RepositoryBrowser = Depends(get_browser)) -> LoginFormResponse:
    """Describe the login form."""
    return LoginFormResponse.from_domain(browser.print_login())


@router.post("/login", response_model=LoginResponse)
def check_login(
    github_username: str = Form(""),
    browser: RepositoryBrowser = Depends(get_browser),
) -> LoginResponse:
    """Accept the stored or submitted GitHub username, or return the login form.

    The form field is optional: an empty POST only checks the stored username.
    """
    if browser.check_login(github_username):
        return LoginResponse(logged_in=True)
    form = LoginFormResponse.from_domain(browser.print_login())
    return LoginResponse(logged_in=False, login=form.login)


@router.post("/logout", response_model=LoginFormResponse)
def logout(browser: RepositoryBrowser = Depends(get_browser)) -> LoginFormResponse:
    """Forget the GitHub username."""
    return LoginFormResponse.from_domain(browser.logout())


@router.get(
    "/listing",
    response_model=ListingResponse,
    responses={
        401: {"model": ErrorResponse, "description": "No GitHub username for this user"},
    },
)
def get_listing(
    path: str = Query(""),
    page: str = Query(""),
    browser: RepositoryBrowser = Depends(get_browser),
) -> ListingResponse:
    """List repositories, meta-folders, tags or branches at *path*."""
    if not browser.check_login():
        raise AuthenticationFailure("Log in with a GitHub username first.")
    return ListingResponse.from_domain(browser.get_listing(path, page))


@router.post("/file", response_model=FileResponse | None)
def get_file(
    body: FileRequest,
    browser: RepositoryBrowser = Depends(get_browser),
) -> FileResponse | None:
    """Download a zipball into the staging area; ``null`` when it failed."""
    downloaded = browser.get_file(body.url, body.filename)
    return FileResponse.from_domain(downloaded) if downloaded else None


@router.get("/capabilities", response_model=CapabilitiesResponse)
def capabilities(browser: RepositoryBrowser = Depends(get_browser)) -> CapabilitiesResponse:
    """Supported file types and return modes."""
    return CapabilitiesResponse.from_domain(browser.capabilities())
