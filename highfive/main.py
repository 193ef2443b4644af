"""
FastAPI Application Entry Point
Main application setup and route registration
"""

from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from highfive import __version__
from highfive.config import settings
from highfive.database import connect_db, disconnect_db

BASE_DIR = Path(__file__).resolve().parent.parent

# Public pages: path -> (page key, title)
PUBLIC_PAGES = {
    "/": ("home", "Home"),
    "/about": ("about", "About Us"),
    "/services": ("services", "Services"),
    "/projects": ("projects", "Projects"),
    "/team": ("team", "Our Team"),
    "/events": ("events", "Events"),
    "/network": ("network", "Our Network"),
    "/contact": ("contact", "Contact"),
    "/apply": ("apply", "Apply"),
    "/join": ("join", "Join the Team"),
    "/partner": ("partner", "Become a Partner"),
    "/privacy": ("privacy", "Privacy Policy"),
    "/terms": ("terms", "Terms of Service"),
}

ADMIN_SECTIONS = (
    "activity", "team", "services", "packages", "projects", "events", "network",
    "applications", "feedback",
)


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Prevent browser from caching HTML pages"""
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        ct = response.headers.get("content-type", "")
        if "text/html" in ct:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="HighFive Enterprises website and admin API",
    version=__version__,
    debug=settings.DEBUG
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# No-cache middleware for HTML pages
app.add_middleware(NoCacheMiddleware)

# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# Mount static files
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


# API calls get JSON, browsers get the styled page
@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    accept = request.headers.get("accept", "")
    detail = getattr(exc, "detail", None) or "Not Found"
    if request.url.path.startswith(("/api/", "/auth/")) or "application/json" in accept:
        return JSONResponse(status_code=404, content={"detail": detail})
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"app_name": settings.APP_NAME},
        status_code=404
    )


# Startup event
@app.on_event("startup")
async def startup():
    """Run on application startup"""
    await connect_db()
    if not settings.admin_emails:
        print("[WARN] ADMIN_EMAILS is empty; nobody can sign in to the admin panel")
    print(f"[START] {settings.APP_NAME} started in {settings.APP_ENV} mode")


# Shutdown event
@app.on_event("shutdown")
async def shutdown():
    """Run on application shutdown"""
    await disconnect_db()
    print("[OK] Shutdown complete")


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": __version__
    }


# HTML Page Routes
def _page_route(page: str, title: str):
    async def render(request: Request):
        return templates.TemplateResponse(
            request,
            "page.html",
            {"app_name": settings.APP_NAME, "page": page, "title": title}
        )
    render.__name__ = f"{page}_page"
    return render


for _path, (_page, _title) in PUBLIC_PAGES.items():
    app.add_api_route(_path, _page_route(_page, _title), response_class=HTMLResponse, include_in_schema=False)


@app.get("/projects/{project_id}", response_class=HTMLResponse, include_in_schema=False)
async def project_page(request: Request, project_id: str):
    """Single project page"""
    return templates.TemplateResponse(
        request,
        "page.html",
        {"app_name": settings.APP_NAME, "page": "project", "title": "Project", "project_id": project_id}
    )


@app.get("/admin/login", response_class=HTMLResponse, include_in_schema=False)
async def admin_login_page(request: Request):
    """Admin login page"""
    return templates.TemplateResponse(request, "admin/login.html", {"app_name": settings.APP_NAME})


@app.get("/admin", response_class=HTMLResponse, include_in_schema=False)
@app.get("/admin/{section}", response_class=HTMLResponse, include_in_schema=False)
async def admin_page(request: Request, section: str = "activity"):
    """Admin panel shell; the session check runs client-side"""
    if section not in ADMIN_SECTIONS:
        return await not_found_handler(request, None)
    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        {"app_name": settings.APP_NAME, "section": section, "sections": ADMIN_SECTIONS}
    )


# Import and include routers
from highfive.routes import auth, admin, public

app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(public.router, prefix="/api", tags=["Public"])
app.include_router(admin.router, prefix="/api", tags=["Admin"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "highfive.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True  # Auto-reload on code changes
    )
