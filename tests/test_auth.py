from reqopts.auth import AuthMode, Authentication, Bearer


def test_auth_string_joins_user_and_password():
    username = "user"
    password = "password"
    auth = Authentication(username, password, AuthMode.BASIC)
    assert auth.auth_string == f"{username}:{password}"
    assert auth.auth_mode is AuthMode.BASIC


def test_digest_mode_kept():
    password = "password"
    auth = Authentication("user", password, AuthMode.DIGEST)
    assert auth.auth_mode is AuthMode.DIGEST


def test_clear_wipes_credential():
    password = "password"
    auth = Authentication("user", password, AuthMode.BASIC)
    auth.clear()
    assert auth.auth_string == ""


def test_context_manager_wipes_on_exit():
    password = "password"
    with Authentication("user", password, AuthMode.BASIC) as auth:
        assert password in auth.auth_string
    assert auth.auth_string == ""


def test_repr_hides_credential():
    password = "password"
    auth = Authentication("user", password, AuthMode.BASIC)
    assert password not in repr(auth)
    assert "BASIC" in repr(auth)


def test_bearer_token():
    bearer = Bearer("token")
    assert bearer.token == "token"


def test_bearer_clear_and_context():
    with Bearer("token") as bearer:
        assert bearer.token == "token"
    assert bearer.token == ""
    assert "token" not in repr(Bearer("secret")) or repr(Bearer("secret")) == "Bearer(...)"