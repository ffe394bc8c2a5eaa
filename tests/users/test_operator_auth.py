from __future__ import annotations

import pytest

from src.mess_attendance.mess_attendance.core.exceptions import AuthenticationError
from src.mess_attendance.mess_attendance.users.service import OperatorAuthService


def test_valid_credentials():
    auth = OperatorAuthService("operator", "secret")

    assert auth.authenticate("operator", "secret").username == "operator"


@pytest.mark.parametrize("username, password", [("operator", "wrong"), ("other", "secret"), ("", "secret"), ("operator", "")])
def test_wrong_credentials_raise(username, password):
    with pytest.raises(AuthenticationError):
        OperatorAuthService("operator", "secret").authenticate(username, password)


def test_unconfigured_account_never_authenticates():
    auth = OperatorAuthService(None, None)

    assert not auth.configured
    with pytest.raises(AuthenticationError):
        auth.authenticate("admin", "admin")
