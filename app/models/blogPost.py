import re
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Literal, Optional
from app.models.partialUpdate import PartialUpdate

BlogCategory = Literal["Destinations", "Travel Tips", "Photography", "Budget Travel", "Adventure", "Culture", "Food"]

IMAGE_PATH_PATTERN = re.compile(r"^(https?://|/images/)")
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

BLOG_REQUIRED_FIELDS = [
    "title",
    "excerpt",
    "content",
    "author",
    "readTime",
    "category",
    "tags",
    "featuredImage",
    "seo",
]


def slugify(title: str) -> str:
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def check_image_path(value: Optional[str], message: str) -> Optional[str]:
    if value is not None and not IMAGE_PATH_PATTERN.match(value):
        raise ValueError(message)
    return value


def check_slug(slug: Optional[str]) -> Optional[str]:
    if slug is None:
        return None
    slug = slug.lower()
    if not SLUG_PATTERN.match(slug):
        raise ValueError("Slug can only contain lowercase letters, numbers and hyphens")
    return slug


class Author(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    avatar: str
    bio: str = Field(..., min_length=1, max_length=500)

    @field_validator("avatar")
    @classmethod
    def avatar_path(cls, value):
        return check_image_path(value, "Author avatar must be a valid URL or local path")


class Seo(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    metaTitle: str = Field(..., min_length=1, max_length=60)
    metaDescription: str = Field(..., min_length=1, max_length=160)
    keywords: List[str] = Field(..., min_length=1, max_length=20)


class BlogPost(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=100)
    excerpt: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    author: Author
    publishedAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    readTime: int = Field(..., ge=1, le=120)
    category: BlogCategory
    tags: List[str] = Field(..., min_length=1, max_length=10)
    featuredImage: str
    images: List[str] = Field(default_factory=list)
    seo: Seo
    featured: bool = False
    isActive: bool = True
    viewCount: int = Field(0, ge=0)
    likesCount: int = Field(0, ge=0)

    @field_validator("slug")
    @classmethod
    def slug_format(cls, slug):
        return check_slug(slug)

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, tags):
        return [tag.strip().lower() for tag in tags]

    @field_validator("featuredImage")
    @classmethod
    def featured_image_path(cls, value):
        return check_image_path(value, "Featured image must be a valid URL or local path")

    @field_validator("images")
    @classmethod
    def image_paths(cls, images):
        for url in images:
            check_image_path(url, "All images must be valid URLs or local paths")
        return images

    @model_validator(mode="after")
    def default_slug(self):
        if not self.slug:
            self.slug = check_slug(slugify(self.title))
        return self


class BlogPostUpdate(PartialUpdate):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=100)
    excerpt: Optional[str] = Field(None, min_length=1, max_length=500)
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[Author] = None
    publishedAt: Optional[datetime] = None
    readTime: Optional[int] = Field(None, ge=1, le=120)
    category: Optional[BlogCategory] = None
    tags: Optional[List[str]] = Field(None, min_length=1, max_length=10)
    featuredImage: Optional[str] = None
    images: Optional[List[str]] = None
    seo: Optional[Seo] = None
    featured: Optional[bool] = None
    isActive: Optional[bool] = None

    @field_validator("slug")
    @classmethod
    def slug_format(cls, slug):
        return check_slug(slug)

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, tags):
        return [tag.strip().lower() for tag in tags] if tags is not None else None

    @field_validator("featuredImage")
    @classmethod
    def featured_image_path(cls, value):
        return check_image_path(value, "Featured image must be a valid URL or local path")
