"""Bloc Video — iframe embarquée."""
from typing import Literal
from .base import BlockContent

BLOCK_TYPE: Literal["video"] = "video"
LABEL = "Video Embed"


class VideoContent(BlockContent):
    heading: str = "Watch it in action"
    videoUrl: str = "https://www.youtube.com/embed/dQw4w9WgXcQ"
    description: str = "See how our platform can transform your workflow."
