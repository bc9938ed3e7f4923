"""Per-request session handling.

The client holds only an opaque token in a cookie; everything else lives
in the server-side SessionRepository. Each request gets its Session as
an explicit dependency, and the session is saved after the endpoint
returns if anything marked it modified. A brand-new session that nothing
touched is never stored.
"""

from __future__ import annotations

from typing import Iterator

from fastapi import Depends, Request, Response

from storefront.domain.model.session import Session
from storefront.infrastructure.web.services import Services, get_services


def _set_cookie(response: Response, services: Services, session: Session) -> None:
    # A response carries at most one session cookie: drop any token set
    # earlier in the same request before setting the current one.
    prefix = f"{services.session_cookie}=".encode("latin-1")
    response.raw_headers[:] = [
        (name, value)
        for name, value in response.raw_headers
        if not (name == b"set-cookie" and value.startswith(prefix))
    ]
    response.set_cookie(
        services.session_cookie,
        session.id,
        httponly=True,
        samesite="lax",
        max_age=int(services.session_ttl.total_seconds()),
    )


def current_session(
    request: Request,
    response: Response,
    services: Services = Depends(get_services),
) -> Iterator[Session]:
    token = request.cookies.get(services.session_cookie)
    session = services.session_repo.get(token) if token else None
    if session is None:
        session = Session.new()
        _set_cookie(response, services, session)

    try:
        yield session
    finally:
        if session.modified:
            services.session_repo.save(session)


def rotate_session(session: Session, response: Response, services: Services) -> None:
    """Issue a fresh token for *session* after sign-in, retiring the old one."""
    services.session_repo.delete(session.id)
    session.id = Session.new().id
    session.mark_modified()
    _set_cookie(response, services, session)
