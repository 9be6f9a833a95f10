"""
Blog List API

CRUD endpoints for the blog list.
"""
import logging
from fastapi import FastAPI, APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from apps.shared.database import get_db, Base, engine, check_db_connection
from apps.shared.cors import setup_cors
from apps.shared.errors import setup_error_handlers
from apps.shared.request_logging import setup_logging, setup_request_logging
from apps.shared.security_headers import setup_security_headers
from apps.blog.store import BlogStore
from apps.blog.schemas import BlogCreate, BlogUpdate, BlogResponse

setup_logging()
logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Blog List API",
    version="1.0.0",
    description="Blog list with likes",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)

setup_cors(app)
setup_security_headers(app)
setup_request_logging(app)
setup_error_handlers(app)


def get_store(db: Session = Depends(get_db)) -> BlogStore:
    return BlogStore(db)


# Service endpoints
service_router = APIRouter(prefix="/api", tags=["service"])


@service_router.get("/health")
def health():
    """Health check endpoint."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "blog",
        "database": "connected" if db_connected else "disconnected",
    }


router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogResponse])
def list_blogs(store: BlogStore = Depends(get_store)):
    """List all blogs, oldest first."""
    return store.find_all()


@router.get("/{blog_id}", response_model=BlogResponse)
def get_blog(blog_id: str, store: BlogStore = Depends(get_store)):
    """Get a single blog by id."""
    blog = store.find_by_id(blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.post("", response_model=BlogResponse, status_code=201)
def create_blog(blog_data: BlogCreate, store: BlogStore = Depends(get_store)):
    """Create a new blog. Title and url are required, likes defaults to 0."""
    return store.insert(blog_data.model_dump())


@router.put("/{blog_id}", response_model=BlogResponse)
def update_blog(
    blog_id: str,
    blog_data: BlogUpdate,
    store: BlogStore = Depends(get_store),
):
    """Update an existing blog. Only the fields present in the body change."""
    blog = store.update_by_id(blog_id, blog_data.model_dump(exclude_unset=True))
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.delete("/{blog_id}", status_code=204)
def delete_blog(blog_id: str, store: BlogStore = Depends(get_store)):
    """Delete a blog. Deleting an unknown id is not an error."""
    if not store.delete_by_id(blog_id):
        logger.debug(f"Delete of unknown blog {blog_id} ignored")


# TODO: require a user token on create/update/delete once user accounts exist

app.include_router(service_router)
app.include_router(router)
