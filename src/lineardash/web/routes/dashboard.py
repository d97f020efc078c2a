"""Dashboard page."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from lineardash.web.dependencies import ConfigDep, FetcherDep
from lineardash.web.render import render_dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/", response_class=HTMLResponse)
async def dashboard(config: ConfigDep, fetcher: FetcherDep) -> HTMLResponse:
    """Render the viewer's assigned issues.

    Linear is queried on every request; the Cache-Control header lets a CDN
    or proxy reuse the page for ``revalidate_seconds`` before fetching again.
    """
    issues = await fetcher.fetch_assigned_issues()
    html = render_dashboard(issues, has_credential=config.has_credential)
    return HTMLResponse(
        content=html,
        headers={
            "Cache-Control": (
                f"public, s-maxage={config.revalidate_seconds}, stale-while-revalidate"
            )
        },
    )
