"""
Framing Price Calculator.

Turns artwork dimensions + material selections into an itemized price.
Pure math: tier lookup, unit price × perimeter or area, multipliers, tax.

Input: order specs dict (image size, mat borders, material keys, complexity, rush)
Output: {"breakdown": {...}, "finished_size": {...}}

The calculator NEVER raises. Unknown material keys fall back to a default
unit price, a missing mat prices at zero, and the tier lookup falls back to
the largest tier. Forms call this while half-filled, so a number always
comes back.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP

logger = logging.getLogger(__name__)


# Sliding scale by finished area (sq in). Upper bounds are inclusive; each tier
# starts just above the previous tier's upper bound.
PRICING_TIERS = [
    {"max_size": 64, "base_price": 45.0, "labor_multiplier": 1.0},             # 8x8 and smaller
    {"max_size": 144, "base_price": 65.0, "labor_multiplier": 1.2},            # up to 12x12
    {"max_size": 320, "base_price": 85.0, "labor_multiplier": 1.4},            # up to 16x20
    {"max_size": 576, "base_price": 125.0, "labor_multiplier": 1.6},           # up to 24x24
    {"max_size": 1024, "base_price": 185.0, "labor_multiplier": 1.8},          # up to 32x32
    {"max_size": 1600, "base_price": 265.0, "labor_multiplier": 2.0},          # up to 40x40
    {"max_size": float("inf"), "base_price": 350.0, "labor_multiplier": 2.5},  # oversize
]

# Frames are per linear inch of perimeter; mats, glass and backing per sq in.
MATERIAL_PRICING = {
    "frame": {
        "basic-wood": 2.50,
        "premium-wood": 4.50,
        "metal-standard": 3.25,
        "metal-premium": 5.75,
        "ornate-gold": 8.50,
        "contemporary": 6.25,
    },
    "mat": {
        "standard": 0.15,
        "conservation": 0.25,
        "fabric": 0.35,
        "specialty": 0.45,
    },
    "glass": {
        "regular": 0.08,
        "uv-protection": 0.18,
        "museum": 0.35,
        "anti-glare": 0.22,
    },
    "backing": {
        "standard": 0.05,
        "archival": 0.12,
        "foam-core": 0.08,
    },
}

DEFAULT_UNIT_PRICES = {
    "frame": 3.0,
    "mat": 0.15,
    "glass": 0.08,
    "backing": 0.05,
}

PRICING_UNITS = {
    "frame": "linear_inch",
    "mat": "square_inch",
    "glass": "square_inch",
    "backing": "square_inch",
}

NO_MAT_VALUES = (None, "", "none")

COMPLEXITY_MULTIPLIERS = {
    "simple": 1.0,
    "medium": 1.3,
    "complex": 1.7,
}

RUSH_SURCHARGE = 0.5
TAX_RATE = 0.0875

CENT = Decimal("0.01")


def round_cents(value: float) -> float:
    """
    Round a money amount to cents, halves away from zero.

    Works on the exact binary value of the float, so 682.125 (exact in
    binary) becomes 682.13, while a tax that lands a hair under x.xx5
    still rounds down.
    """
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def finished_dimensions(image_width: float, image_height: float,
                        mat_width: float = 0.0, mat_height: float = 0.0) -> dict:
    """
    Outer size of the framed piece. Mat borders are added on BOTH sides,
    so a 2" mat on a 16" image gives a 20" finished width.
    """
    width = image_width + (mat_width or 0.0) * 2
    height = image_height + (mat_height or 0.0) * 2
    return {
        "width": width,
        "height": height,
        "area": width * height,
        "perimeter": (width + height) * 2,
    }


def select_tier(area: float) -> dict:
    """Return the pricing tier whose range contains area."""
    lower = float("-inf")
    for tier in PRICING_TIERS:
        if lower < area <= tier["max_size"]:
            return tier
        lower = tier["max_size"]
    # Only reachable for NaN areas
    logger.debug("No pricing tier matched area=%s, using largest tier", area)
    return PRICING_TIERS[-1]


def material_unit_price(category: str, key) -> float:
    """Unit price for a material key, or the category default if unknown."""
    table = MATERIAL_PRICING.get(category, {})
    if key in table:
        return table[key]
    logger.debug("Unknown %s material %r, using default unit price", category, key)
    return DEFAULT_UNIT_PRICES.get(category, 0.0)


def has_mat(mat_type) -> bool:
    if isinstance(mat_type, str):
        mat_type = mat_type.strip().lower()
    return mat_type not in NO_MAT_VALUES


def complexity_multiplier(complexity: str) -> float:
    if complexity in COMPLEXITY_MULTIPLIERS:
        return COMPLEXITY_MULTIPLIERS[complexity]
    logger.debug("Unknown complexity %r, using simple multiplier", complexity)
    return COMPLEXITY_MULTIPLIERS["simple"]


def calculate_framing_price(specs: dict, tax_rate: float = TAX_RATE) -> dict:
    """
    Price a framing job.

    Args:
        specs: {
            "image_width": float,       # inches
            "image_height": float,
            "mat_width": float,         # optional, border per side
            "mat_height": float,        # optional, border per side
            "frame_style": str,
            "mat_type": str | None,     # None / "" / "none" = no mat
            "glass_type": str,
            "backing_type": str,
            "complexity": "simple" | "medium" | "complex",
            "rush": bool,               # optional
        }
        tax_rate: sales tax applied to the subtotal

    Returns:
        {
            "breakdown": {base_price, frame_price, mat_price, glass_price,
                          backing_price, labor_price, rush_fee, subtotal,
                          tax, total},   # all rounded to cents
            "finished_size": {width, height, area},   # unrounded
        }
    """
    size = finished_dimensions(
        specs.get("image_width") or 0.0,
        specs.get("image_height") or 0.0,
        specs.get("mat_width") or 0.0,
        specs.get("mat_height") or 0.0,
    )
    area = size["area"]
    tier = select_tier(area)

    base_price = tier["base_price"]
    frame_price = material_unit_price("frame", specs.get("frame_style")) * size["perimeter"]
    if has_mat(specs.get("mat_type")):
        mat_price = material_unit_price("mat", specs.get("mat_type")) * area
    else:
        mat_price = 0.0
    glass_price = material_unit_price("glass", specs.get("glass_type")) * area
    backing_price = material_unit_price("backing", specs.get("backing_type")) * area

    labor_price = (base_price * tier["labor_multiplier"]
                   * complexity_multiplier(specs.get("complexity")))

    # Rush applies to frame, mat, glass and labor only. Base and backing are not surcharged.
    if specs.get("rush"):
        rush_fee = (frame_price + mat_price + glass_price + labor_price) * RUSH_SURCHARGE
    else:
        rush_fee = 0.0

    subtotal = (base_price + frame_price + mat_price + glass_price
                + backing_price + labor_price + rush_fee)
    tax = subtotal * tax_rate
    total = subtotal + tax

    breakdown = {
        "base_price": base_price,
        "frame_price": frame_price,
        "mat_price": mat_price,
        "glass_price": glass_price,
        "backing_price": backing_price,
        "labor_price": labor_price,
        "rush_fee": rush_fee,
        "subtotal": subtotal,
        "tax": tax,
        "total": total,
    }
    return {
        "breakdown": {k: round_cents(v) for k, v in breakdown.items()},
        "finished_size": {
            "width": size["width"],
            "height": size["height"],
            "area": area,
        },
    }


def build_catalog() -> dict:
    """
    Material options for order-entry forms: every key with its unit price,
    the pricing unit and the fallback price per category.
    """
    return {
        "materials": {
            category: {
                "unit": PRICING_UNITS[category],
                "default_unit_price": DEFAULT_UNIT_PRICES[category],
                "options": [
                    {"key": key, "unit_price": price}
                    for key, price in table.items()
                ],
            }
            for category, table in MATERIAL_PRICING.items()
        },
        "tiers": [
            {
                "max_size": None if tier["max_size"] == float("inf") else tier["max_size"],
                "base_price": tier["base_price"],
                "labor_multiplier": tier["labor_multiplier"],
            }
            for tier in PRICING_TIERS
        ],
        "complexity_multipliers": dict(COMPLEXITY_MULTIPLIERS),
        "rush_surcharge": RUSH_SURCHARGE,
    }
