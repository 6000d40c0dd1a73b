from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LoginMode = Literal["sign_in", "sign_up"]
ShellView = Literal["login", "dashboard"]


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @property
    def display_name(self) -> str:
        return self.name or self.email


class LoginRequest(BaseModel):
    email: str = Field(default="", max_length=320)
    password: str = Field(default="", max_length=200)
    name: str | None = Field(default=None, max_length=100)
    mode: LoginMode = "sign_in"


class SessionView(BaseModel):
    view: ShellView
    user: Session | None = None
    display_name: str | None = None
