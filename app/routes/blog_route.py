from fastapi import APIRouter, BackgroundTasks, Body, Depends, Request
from bson import ObjectId
from app.database.connection import BLOG_COLLECTION, MongoConnection, get_connection
from app.models.blogPost import BLOG_REQUIRED_FIELDS, BlogPost, BlogPostUpdate
from app.utils.crud_utils import (
    check_required_fields, create_record, get_record, increment_counter, is_object_id,
    list_records, strip_protected, update_record, validate_payload,
)
from app.utils.query_builder import build_blog_query, build_pagination
from app.utils.responses import ApiError, reshape_document
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

DATE_FIELDS = ("publishedAt",)
DUPLICATE_SLUG = "A blog post with this slug already exists"
NOT_FOUND = "Blog post not found"


def post_lookup(slug: str) -> dict:
    """A 24-hex value addresses the post by id, anything else by slug among active posts"""
    if is_object_id(slug):
        return {"_id": ObjectId(slug)}
    return {"slug": slug, "isActive": True}


#  Background task - count a view once the response is sent
async def record_view_background(collection, post_id):
    try:
        await increment_counter(collection, {"_id": post_id}, "viewCount")
    except Exception as e:
        logger.error(f"Failed to increment view count for blog post {post_id}: {str(e)}")


@router.get("")
async def list_posts(request: Request, mongo: MongoConnection = Depends(get_connection)):
    """Get blog posts with filtering, search and pagination"""
    try:
        query = build_blog_query(request.query_params)
        db = await mongo.get_database()
        posts, total = await list_records(db[BLOG_COLLECTION], query, date_fields=DATE_FIELDS)

        logger.info(f"Fetched {len(posts)} of {total} blog posts (page {query.page})")
        return {
            "success": True,
            "data": posts,
            "pagination": build_pagination(query, total, next_key="hasNextPage", prev_key="hasPrevPage"),
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching blog posts: {str(e)}")
        raise ApiError(500, "Failed to fetch blog posts")


@router.post("", status_code=201)
async def create_post(body: dict = Body(...), mongo: MongoConnection = Depends(get_connection)):
    """Create a blog post, deriving the slug from the title when none is given"""
    try:
        check_required_fields(body, BLOG_REQUIRED_FIELDS)
        record = validate_payload(BlogPost, body)

        db = await mongo.get_database()
        post = await create_record(
            db[BLOG_COLLECTION],
            record,
            duplicate_message=DUPLICATE_SLUG,
            date_fields=DATE_FIELDS,
        )
        return {
            "success": True,
            "data": post,
            "message": "Blog post created successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating blog post: {str(e)}")
        raise ApiError(500, "Failed to create blog post")


@router.get("/{slug}")
async def get_post(slug: str, background_tasks: BackgroundTasks, mongo: MongoConnection = Depends(get_connection)):
    try:
        db = await mongo.get_database()
        collection = db[BLOG_COLLECTION]
        post = await get_record(collection, post_lookup(slug), NOT_FOUND)

        background_tasks.add_task(record_view_background, collection, post["_id"])
        return {"success": True, "data": reshape_document(post, DATE_FIELDS)}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching blog post {slug}: {str(e)}")
        raise ApiError(500, "Failed to fetch blog post")


@router.put("/{slug}")
async def update_post(slug: str, body: dict = Body(...), mongo: MongoConnection = Depends(get_connection)):
    try:
        body = strip_protected(body, extra=("viewCount", "likesCount"))
        changes = validate_payload(BlogPostUpdate, body, partial=True)

        db = await mongo.get_database()
        post = await update_record(
            db[BLOG_COLLECTION],
            post_lookup(slug),
            changes,
            NOT_FOUND,
            duplicate_message=DUPLICATE_SLUG,
            date_fields=DATE_FIELDS,
        )
        logger.info(f"Updated blog post {slug}")
        return {
            "success": True,
            "data": post,
            "message": "Blog post updated successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error updating blog post {slug}: {str(e)}")
        raise ApiError(500, "Failed to update blog post")


@router.delete("/{slug}")
async def delete_post(slug: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        db = await mongo.get_database()
        await update_record(db[BLOG_COLLECTION], post_lookup(slug), {"isActive": False}, NOT_FOUND)

        logger.info(f"Deactivated blog post {slug}")
        return {"success": True, "message": "Blog post deleted successfully"}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error deleting blog post {slug}: {str(e)}")
        raise ApiError(500, "Failed to delete blog post")


@router.patch("/{slug}/like")
async def like_post(slug: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        db = await mongo.get_database()
        post = await increment_counter(db[BLOG_COLLECTION], post_lookup(slug), "likesCount")
        if post is None:
            raise ApiError(404, NOT_FOUND)

        return {
            "success": True,
            "data": {"likesCount": post["likesCount"]},
            "message": "Blog post liked successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error liking blog post {slug}: {str(e)}")
        raise ApiError(500, "Failed to like blog post")
