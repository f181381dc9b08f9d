from byteblog.shared.logging import register_cookie_name, sanitize_message


def test_passwords_and_digests_are_redacted() -> None:
    message = sanitize_message("login password=hunter22 digest scrypt:1024:8:1$abcd$0123ef")

    assert "hunter22" not in message
    assert "0123ef" not in message


def test_session_cookie_is_redacted() -> None:
    register_cookie_name("byteblog_session")

    message = sanitize_message("Cookie header byteblog_session=AbCdEf0123456789; other=1")

    assert "AbCdEf0123456789" not in message
    assert "other=1" in message


def test_configured_cookie_name_is_redacted() -> None:
    register_cookie_name("blog_sid")

    message = sanitize_message("set blog_sid=Zx9_short-tok; theme=dark")

    assert "Zx9_short-tok" not in message
    assert "blog_sid=***REDACTED***" in message
    assert "theme=dark" in message


def test_cookie_name_must_match_whole_name() -> None:
    register_cookie_name("sid")

    message = sanitize_message("query mysid=keepme")

    assert "mysid=keepme" in message
