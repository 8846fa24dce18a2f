"""Bloc Blog — derniers articles."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["blog"] = "blog"
LABEL = "Blog Article"


class BlogPost(BaseModel):
    title: str
    excerpt: str = ""


class BlogContent(BlockContent):
    heading: str = "Latest News"
    posts: List[BlogPost] = Field(default_factory=lambda: [
        BlogPost(title="The Future of Web Design", excerpt="Exploring the trends that will shape 2025."),
        BlogPost(title="Optimizing for Performance", excerpt="Tips and tricks to make your site fly."),
        BlogPost(title="Design Systems 101", excerpt="How to maintain consistency at scale."),
    ])
