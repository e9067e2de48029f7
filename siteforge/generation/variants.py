"""Design variant plan: the six (style, palette) combinations, in delivery order."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DesignVariant(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    style: str
    color_theme: str
    description: str


DESIGN_VARIANTS: tuple[DesignVariant, ...] = (
    DesignVariant(
        style="Modern & Clean",
        color_theme="White, Slate Gray, and Sky Blue",
        description="Minimalist and structured layout with cool tones.",
    ),
    DesignVariant(
        style="Elegant & Professional",
        color_theme="Off-white, Charcoal, and Gold",
        description="Sophisticated design ideal for high-end services.",
    ),
    DesignVariant(
        style="Natural & Earthy",
        color_theme="Beige, Forest Green, and Brown",
        description="Organic feel with warm colors for eco-friendly businesses.",
    ),
    DesignVariant(
        style="Bold & Vibrant",
        color_theme="Dark Gray, White, and Bright Red",
        description="High-impact, eye-catching design with strong contrast.",
    ),
    DesignVariant(
        style="Minimalist & Serene",
        color_theme="Light Gray, White, and a soft Sage Green",
        description="Calm and simple, focusing heavily on readability.",
    ),
    DesignVariant(
        style="Tech & Futuristic",
        color_theme="Deep Blue, Black, and Electric Cyan",
        description="Sleek, dark mode design for technology and SaaS.",
    ),
)


def get_variant_plan() -> list[DesignVariant]:
    """Return the variant plan; index 0 is generated first."""
    return list(DESIGN_VARIANTS)
