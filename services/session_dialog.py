# coinkard/services/session_dialog.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class DialogState(Enum):
    CLOSED = "closed"
    OPEN_AS_LOGIN = "login"
    OPEN_AS_SIGNUP = "signup"


class SessionDialog:
    """
    Login / sign-up dialog controller.

    Closed -> open() -> OPEN_AS_LOGIN <-> switch_mode() <-> OPEN_AS_SIGNUP -> close() -> Closed.
    Field text only lives while the dialog is open. Confirming does nothing beyond logging:
    there is no account backend.
    """

    def __init__(self):
        self.state = DialogState.CLOSED
        self.email = ""
        self.password = ""

    @property
    def is_open(self) -> bool:
        return self.state is not DialogState.CLOSED

    @property
    def mode_label(self) -> str:
        return "Sign Up" if self.state is DialogState.OPEN_AS_SIGNUP else "Login"

    def open(self) -> None:
        if self.is_open:
            return
        self.state = DialogState.OPEN_AS_LOGIN
        logger.info("Session dialog opened in login mode.")

    def switch_mode(self) -> None:
        if self.state is DialogState.OPEN_AS_LOGIN:
            self.state = DialogState.OPEN_AS_SIGNUP
        elif self.state is DialogState.OPEN_AS_SIGNUP:
            self.state = DialogState.OPEN_AS_LOGIN
        else:
            return
        logger.info(f"Session dialog switched to {self.mode_label} mode.")

    def close(self) -> None:
        if not self.is_open:
            return
        self.state = DialogState.CLOSED
        self.email = ""
        self.password = ""
        logger.info("Session dialog closed; field input discarded.")

    def update_fields(self, email: str = "", password: str = "") -> None:
        if not self.is_open:
            return
        self.email = email
        self.password = password

    def submit(self) -> None:
        """Stub for the Login / Sign Up confirmation. Has no effect on dialog state."""
        logger.info(f"{self.mode_label} requested for {self.email or '<no email>'}; no account backend is configured.")
