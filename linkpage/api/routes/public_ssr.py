"""
Public SSR Routes - Server-rendered profile pages at /<username> and /@<username>.

Every stored field is escaped except text-block markup, which is inserted
as stored.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from linkpage.api.routes.public import compose_page
from linkpage.components.blocks import ContentUnit, GalleryUnit, ImageUnit, TextUnit
from linkpage.components.compose import ComposeOutput, PageViewModel
from linkpage.components.icons import GlyphIcon, IconDescriptor
from linkpage.components.links import LinkUnit

router = APIRouter()


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


# --- HTML Rendering ---


def _render_icon(icon: IconDescriptor) -> str:
    if isinstance(icon, GlyphIcon):
        return (
            f'<span class="icon icon-{_escape_html(icon.glyph)} icon-{icon.treatment}" '
            f'style="color: {_escape_html(icon.color)}" '
            f'aria-label="{_escape_html(icon.label)}"></span>'
        )
    return (
        f'<img class="icon icon-{icon.shape}" src="{_escape_html(icon.image_url)}" '
        f'alt="{_escape_html(icon.alt)}" />'
    )


def _render_link(unit: LinkUnit, click_url: str) -> str:
    description = (
        f'<span class="description" style="color: {unit.muted_text_color}">'
        f"{_escape_html(unit.description)}</span>"
        if unit.description
        else ""
    )
    return (
        f'<a class="link" href="{_escape_html(click_url)}" rel="noopener" '
        f'style="background: {unit.background_color}; border: 1px solid {unit.border_color}; '
        f'color: {unit.text_color}">'
        f"{_render_icon(unit.icon)}"
        f'<span class="title">{_escape_html(unit.title)}</span>{description}</a>'
    )


def _render_title(title: str | None) -> str:
    return f"<h3>{_escape_html(title)}</h3>" if title else ""


def _render_content(unit: ContentUnit) -> str:
    if isinstance(unit, ImageUnit):
        return (
            f'<figure class="block block-image">{_render_title(unit.title)}'
            f'<img src="{_escape_html(unit.image_url)}" alt="{_escape_html(unit.alt)}" />'
            f"</figure>"
        )
    if isinstance(unit, TextUnit):
        return (
            f'<section class="block block-text" style="background: {unit.background}; '
            f'border-{unit.border_side}: 4px solid {unit.accent_color}">'
            f"{_render_title(unit.title)}<div>{unit.markup}</div></section>"
        )
    if isinstance(unit, GalleryUnit):
        images = "".join(
            f'<img src="{_escape_html(url)}" alt="" loading="lazy" />' for url in unit.images
        )
        return (
            f'<section class="block block-gallery">{_render_title(unit.title)}'
            f'<div style="display: grid; grid-template-columns: repeat({unit.columns}, 1fr)">'
            f"{images}</div></section>"
        )
    raise TypeError(f"Unknown content unit {type(unit).__name__}")


def render_profile_page(page: PageViewModel) -> str:
    """Render a complete HTML document for a composed page."""
    theme = page.theme
    header = page.header
    background = theme.background_color or (
        f"linear-gradient(135deg, {theme.background.gradient_from}, "
        f"{theme.background.gradient_to})"
    )
    avatar = (
        f'<img class="avatar" src="{_escape_html(header.avatar_url)}" '
        f'alt="{_escape_html(header.display_name)}" />'
        if header.avatar_url
        else ""
    )
    click_base = f"/api/public/profiles/{_escape_html(header.username)}/links"
    links = "".join(
        _render_link(unit, f"{click_base}/{unit.link_id}/click") for unit in page.links
    )
    content = "".join(_render_content(unit) for unit in page.content)

    return f"""<!DOCTYPE html>
<html dir="{theme.direction}">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{_escape_html(header.display_name)}</title>
    <meta name="description" content="{_escape_html(header.bio)}" />
</head>
<body style="margin: 0; background: {background}; font-family: {_escape_html(theme.font_family)}; font-size: {theme.font_size}; color: {theme.text_color}; text-align: {theme.start_side}">
    <main style="max-width: {theme.page_width}; margin: 0 auto; padding: 2rem 1rem">
        <header>
            {avatar}
            <h1 style="color: {theme.heading_color}">{_escape_html(header.display_name)}</h1>
            <p style="color: {theme.muted_text_color}">{_escape_html(header.bio)}</p>
        </header>
        <div class="content">{content}</div>
        <nav class="links">{links}</nav>
    </main>
</body>
</html>"""


def render_not_found_page(username: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <title>Profile not found</title>
</head>
<body>
    <h1>Profile not found</h1>
    <p>No page is published at /{_escape_html(username)}.</p>
</body>
</html>"""


# --- SSR Endpoints ---


def _respond(result: ComposeOutput) -> HTMLResponse:
    if result.not_found is not None:
        return HTMLResponse(render_not_found_page(result.not_found.username), status_code=404)
    assert result.page is not None
    return HTMLResponse(render_profile_page(result.page))


@router.get("/@{username}", response_class=HTMLResponse)
def ssr_profile_at(result: ComposeOutput = Depends(compose_page)) -> HTMLResponse:
    return _respond(result)


# Registered last: matches any single path segment
@router.get("/{username}", response_class=HTMLResponse)
def ssr_profile(result: ComposeOutput = Depends(compose_page)) -> HTMLResponse:
    return _respond(result)
