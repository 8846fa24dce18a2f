"""Bloc Pricing — grille de plans tarifaires."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["pricing"] = "pricing"
LABEL = "Pricing Table"


class PricingPlan(BaseModel):
    name: str
    price: str
    features: List[str] = []


class PricingContent(BlockContent):
    heading: str = "Simple Pricing"
    plans: List[PricingPlan] = Field(default_factory=lambda: [
        PricingPlan(name="Starter", price="$0", features=["1 Project", "Basic Analytics", "Community Support"]),
        PricingPlan(name="Pro", price="$29", features=["Unlimited Projects", "Pro Analytics", "Priority Support"]),
        PricingPlan(name="Enterprise", price="$99", features=["Custom Solutions", "Dedicated Manager", "24/7 Support"]),
    ])
