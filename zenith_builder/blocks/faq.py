"""Bloc FAQ — liste questions / réponses."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["faq"] = "faq"
LABEL = "FAQ Section"


class FAQItem(BaseModel):
    question: str
    answer: str


class FAQContent(BlockContent):
    heading: str = "Frequently Asked Questions"
    items: List[FAQItem] = Field(default_factory=lambda: [
        FAQItem(question="Is there a free trial?", answer="Yes, we offer a 14-day free trial on all plans."),
        FAQItem(question="Can I cancel anytime?", answer="Absolutely. There are no lock-in contracts."),
        FAQItem(question="Do you offer support?", answer="Yes, our team is available 24/7 to help you."),
    ])
