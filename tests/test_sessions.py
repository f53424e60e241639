"""Session store behaviour."""

from parambind import Request, Response, SessionStore


def test_load_without_cookie_opens_new_session() -> None:
    store = SessionStore()
    session = store.load(Request("GET", "/"))
    assert len(store) == 1
    assert store.load(Request("GET", "/")) is not session


def test_load_by_cookie_returns_same_session() -> None:
    store = SessionStore("sid")
    session = store.load(Request("GET", "/"))
    session.set_attribute("user", "ada")
    again = store.load(Request("GET", "/", headers={"Cookie": f"sid={session.id}"}))
    assert again is session
    assert again.attribute("user") == "ada"


def test_unknown_cookie_opens_new_session() -> None:
    store = SessionStore()
    session = store.load(Request("GET", "/", headers={"Cookie": "SESSION=stale"}))
    assert session.id != "stale"


def test_commit_sets_http_only_cookie() -> None:
    store = SessionStore()
    session = store.load(Request("GET", "/"))
    response = Response()
    store.commit(session, response)
    cookie = response.serialize()[2]["set-cookie"]
    assert cookie.startswith(f"SESSION={session.id}")
    assert "HttpOnly" in cookie


def test_invalidate_forgets_session() -> None:
    store = SessionStore()
    session = store.load(Request("GET", "/"))
    store.invalidate(session)
    assert len(store) == 0
    store.invalidate(session)


def test_session_attributes() -> None:
    store = SessionStore()
    session = store.load(Request("GET", "/"))
    session.set_attribute("a", 1)
    assert session.attributes() == {"a": 1}
    session.remove_attribute("a")
    session.remove_attribute("missing")
    assert session.attribute("a", "gone") == "gone"
