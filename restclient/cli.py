from __future__ import annotations

import json
import sys
import typing

import click

# ---------------------------------------------------------------------------
# Rich output helpers (graceful fallback when rich is not installed)
# ---------------------------------------------------------------------------

try:
    from rich.console import Console
    from rich.syntax import Syntax
    from rich.text import Text

    HAS_RICH = True
except ImportError:  # pragma: no cover
    HAS_RICH = False

if typing.TYPE_CHECKING:
    from ._models import Response

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


def _status_color(code: int) -> str:
    """Return a rich color name based on the response code category."""
    if code < 0:
        return "bold red"
    elif code < 200:
        return "cyan"
    elif code < 300:
        return "green"
    elif code < 400:
        return "yellow"
    elif code < 500:
        return "red"
    else:
        return "bold red"


def is_binary_content(content: bytes) -> bool:
    return b"\0" in content


def _is_json(response: Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def _pretty_json(text: str) -> str | None:
    try:
        return json.dumps(json.loads(text), indent=4, ensure_ascii=False)
    except (json.JSONDecodeError, TypeError):
        return None


# ---------------------------------------------------------------------------
# Plain-text formatter (used with --no-color or when rich is missing)
# ---------------------------------------------------------------------------


def format_response_plain(response: Response) -> str:
    lines: list[str] = [f"HTTP {response.code}"]

    for key, value in response.headers.items():
        lines.append(f"{key}: {value}")

    lines.append("")

    if response.content and is_binary_content(response.content):
        lines.append(f"<{len(response.content)} bytes of binary data>")
    elif response.body:
        formatted = _pretty_json(response.body) if _is_json(response) else None
        lines.append(formatted if formatted is not None else response.body)

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Rich formatter
# ---------------------------------------------------------------------------


def print_response_rich(console: Console, response: Response) -> None:
    """Pretty-print a response using rich."""
    status_line = Text()
    status_line.append("HTTP ", style="bold dim")
    status_line.append(f"{response.code}", style=f"bold {_status_color(response.code)}")
    console.print(status_line)

    for key, value in response.headers.items():
        header_text = Text()
        header_text.append(f"{key}", style="dim cyan")
        header_text.append(": ", style="dim")
        header_text.append(value)
        console.print(header_text)

    console.print()

    if response.content and is_binary_content(response.content):
        console.print(f"[dim]<{len(response.content)} bytes of binary data>[/dim]")
    elif response.body:
        formatted = _pretty_json(response.body) if _is_json(response) else None
        if formatted is not None:
            console.print(Syntax(formatted, "json", theme="monokai"))
        else:
            console.print(response.body, markup=False)


# ---------------------------------------------------------------------------
# Form field parsing helper (curl-style -F "name=value" / -F "name=@path")
# ---------------------------------------------------------------------------


def parse_form_field(field: str) -> tuple[str, str, bool]:
    """Parse a ``name=value`` or ``name=@path`` form argument.

    Returns ``(name, value, is_file)``.
    """
    name, sep, value = field.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(
            f"Invalid form field: '{field}'. Expected 'name=value' or 'name=@path'."
        )
    if value.startswith("@"):
        return name.strip(), value[1:], True
    return name.strip(), value, False


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


@click.command(help="Send a single HTTP request and print the response.")
@click.argument("url")
@click.option(
    "-m",
    "--method",
    default="GET",
    type=click.Choice(METHODS, case_sensitive=False),
    help="HTTP method.",
)
@click.option(
    "-c", "--content", default="", help="Content to send in the request body."
)
@click.option(
    "-t",
    "--content-type",
    default="text/plain",
    show_default=True,
    help="Content-Type for POST, PUT and PATCH bodies.",
)
@click.option(
    "-F",
    "--form",
    "form_fields",
    multiple=True,
    help='Add a multipart field, e.g. -F "name=value" or -F "file=@path". Implies POST.',
)
@click.option(
    "--no-color", is_flag=True, default=False, help="Disable colored output."
)
def main(
    url: str,
    method: str,
    content: str,
    content_type: str,
    form_fields: tuple[str, ...],
    no_color: bool,
) -> None:
    import restclient as _restclient_mod

    use_rich = HAS_RICH and not no_color and sys.stdout.isatty()
    method = method.upper()

    if _restclient_mod.init() != 0:
        click.echo("restclient: global initialization failed", err=True)
        sys.exit(1)

    try:
        if form_fields:
            with _restclient_mod.PostFormInfo() as form:
                try:
                    for raw in form_fields:
                        name, value, is_file = parse_form_field(raw)
                        if is_file:
                            form.add_form_file(name, value)
                        else:
                            form.add_form_content(name, value)
                    response = _restclient_mod.post_form(url, form)
                except _restclient_mod.FormError as exc:
                    raise click.UsageError(str(exc)) from exc
        elif method in ("POST", "PUT", "PATCH"):
            send = getattr(_restclient_mod, method.lower())
            response = send(url, content_type, content)
        else:
            send = getattr(_restclient_mod, method.lower())
            response = send(url)
    finally:
        _restclient_mod.disable()

    if use_rich:
        print_response_rich(Console(), response)
    else:
        click.echo(format_response_plain(response))

    if not response.ok:
        sys.exit(1)
