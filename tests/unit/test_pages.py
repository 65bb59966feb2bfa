"""Unit tests for HTML rendering."""

from praiseboard.core.exceptions import (
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
from praiseboard.pages import render_error, render_login_page, render_praises_page


def test_login_page_form():
    html = render_login_page()
    assert '<form action="/login" method="POST">' in html
    assert 'type="password" name="password"' in html


def test_praises_page_lists_entries_by_index():
    html = render_praises_page(["first", "second"])

    assert html.count("<li>") == 2
    assert 'action="/praises/0"' in html
    assert 'action="/praises/delete/1"' in html
    assert 'name="updated_praise" value="second"' in html


def test_praises_page_empty():
    html = render_praises_page([])
    assert "<li>" not in html
    assert 'name="praise"' in html


def test_render_error_pages():
    assert "<title>Unauthorized</title>" in render_error(UnauthorizedError())
    assert 'href="/"' in render_error(InvalidCredentialsError())
    assert 'href="/praises"' in render_error(ValidationError())
