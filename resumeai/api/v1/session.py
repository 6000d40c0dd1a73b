from fastapi import APIRouter, HTTPException, Request, status

from resumeai.schemas.session import LoginRequest, SessionView
from resumeai.services.session_shell import LoginValidationError, SessionShell

router = APIRouter()


def _shell(request: Request) -> SessionShell:
    return request.app.state.shell


@router.get("/session", response_model=SessionView)
def get_session(request: Request):
    return _shell(request).view()


@router.post("/session/login", response_model=SessionView)
def login(request: Request, payload: LoginRequest):
    shell = _shell(request)
    try:
        shell.login(payload.email, payload.password, name=payload.name, mode=payload.mode)
    except LoginValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors) from exc
    return shell.view()


@router.post("/session/logout", response_model=SessionView)
def logout(request: Request):
    shell = _shell(request)
    shell.logout()
    request.app.state.dashboard.reset()
    return shell.view()
