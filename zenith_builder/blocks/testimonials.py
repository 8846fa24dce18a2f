"""Bloc Testimonials — citations clients."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["testimonials"] = "testimonials"
LABEL = "Testimonials"


class TestimonialItem(BaseModel):
    quote: str
    author: str
    role: str = ""


class TestimonialsContent(BlockContent):
    heading: str = "Loved by thousands"
    items: List[TestimonialItem] = Field(default_factory=lambda: [
        TestimonialItem(quote="This builder changed how I work. Simply amazing!", author="Sarah J.", role="Designer"),
        TestimonialItem(quote="The flexibility is unmatched. Highly recommended.", author="Mike T.", role="Developer"),
        TestimonialItem(quote="A game changer for our marketing team.", author="Emily R.", role="CMO"),
    ])
