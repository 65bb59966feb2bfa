"""HTML pages served by the praise board.

Praise text is embedded verbatim.
"""

from typing import Sequence

from .core.exceptions import (
    InvalidCredentialsError,
    PraiseBoardException,
    UnauthorizedError,
    ValidationError,
)


def render_login_page() -> str:
    return """<!DOCTYPE html>
<html>
<head><title>Login</title></head>
<body>
  <h1>Praise App</h1>
  <h2>Login</h2>
  <form action="/login" method="POST">
    <input type="text" name="username" placeholder="Username" required>
    <input type="password" name="password" placeholder="Password" required>
    <button type="submit">Login</button>
  </form>
</body>
</html>
"""


def _render_praise_item(index: int, praise: str) -> str:
    return f"""
    <li>
      <form action="/praises/{index}" method="POST">
        <input type="text" name="updated_praise" value="{praise}" required>
        <button type="submit">Update</button>
      </form>
      <form action="/praises/delete/{index}" method="POST">
        <button type="submit">Delete</button>
      </form>
    </li>"""


def render_praises_page(praises: Sequence[str]) -> str:
    """Render the create form, every praise with update/delete forms, and logout."""
    items = "".join(_render_praise_item(i, p) for i, p in enumerate(praises))
    return f"""<!DOCTYPE html>
<html>
<head><title>Praises</title></head>
<body>
  <h1>Submit a Praise</h1>
  <form action="/praises" method="POST">
    <input type="text" name="praise" placeholder="Enter Praise" required>
    <button type="submit">Submit</button>
  </form>

  <h2>All Praises</h2>
  <ul>{items}
  </ul>

  <form action="/logout" method="POST">
    <button type="submit">Logout</button>
  </form>
</body>
</html>
"""


def render_unauthorized_page(message: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head><title>Unauthorized</title></head>
<body>
  <h1>Unauthorized</h1>
  <p>{message}</p>
  <a href="/">Login</a>
</body>
</html>
"""


def render_error(exc: PraiseBoardException) -> str:
    """Pick the HTML body for an application error."""
    if isinstance(exc, UnauthorizedError):
        return render_unauthorized_page(exc.message)
    if isinstance(exc, InvalidCredentialsError):
        return f'<h1>{exc.message}</h1><a href="/">Go Back</a>'
    if isinstance(exc, ValidationError):
        return f'<h1>{exc.message}</h1><a href="/praises">Go Back</a>'
    return f"<h1>{exc.message}</h1>"
