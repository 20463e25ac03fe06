# app/domain/catalog.py
"""
Static lookup tables for the recommendation core.

Built once at import and wrapped in read-only mappings; nothing in the
request path mutates them, so they are safe to share across workers.
"""
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from app.domain.types import BusinessType


class CatalogEntry(NamedTuple):
    name: str
    type: BusinessType
    skills: Tuple[str, ...]


def _freeze_similarity(table) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType({anchor: MappingProxyType(dict(related)) for anchor, related in table})


# anchor skill -> related terms with similarity; iteration order is significant
SIMILARITY_TABLE: Mapping[str, Mapping[str, float]] = _freeze_similarity((
    ("sewing", (
        ("tailoring", 0.95),
        ("stitching", 0.9),
        ("garment making", 0.9),
        ("fashion design", 0.85),
        ("embroidery", 0.8),
        ("alterations", 0.85),
        ("pattern making", 0.85),
    )),
    ("cooking", (
        ("culinary", 0.95),
        ("food preparation", 0.9),
        ("baking", 0.85),
        ("catering", 0.85),
        ("recipe development", 0.8),
        ("food service", 0.8),
    )),
    ("art & craft", (
        ("handicrafts", 0.95),
        ("creativity", 0.85),
        ("traditional arts", 0.9),
        ("pottery", 0.85),
        ("woodwork", 0.8),
        ("jewelry making", 0.85),
        ("handmade", 0.85),
    )),
    ("teaching", (
        ("tutoring", 0.95),
        ("education", 0.9),
        ("training", 0.85),
        ("mentoring", 0.85),
        ("academic", 0.8),
    )),
    ("beauty & makeup", (
        ("hair styling", 0.9),
        ("skincare", 0.85),
        ("aesthetics", 0.85),
        ("cosmetics", 0.9),
        ("beauty", 0.95),
    )),
    ("technology", (
        ("digital marketing", 0.85),
        ("online", 0.8),
        ("e-commerce", 0.85),
        ("social media", 0.8),
        ("content creation", 0.75),
    )),
))


_G, _S, _B = BusinessType.GOODS, BusinessType.SERVICE, BusinessType.BOTH

TEMPLATE_CATALOG: Mapping[str, CatalogEntry] = MappingProxyType({
    # goods
    "sewing": CatalogEntry("Tailoring & Sewing Services", _G, ("sewing", "fashion design", "alterations")),
    "cooking": CatalogEntry("Cooking & Catering Services", _G, ("cooking", "food preparation", "baking")),
    "baking": CatalogEntry("Bakery & Confectionery", _G, ("baking", "cooking", "food preparation")),
    "art & craft": CatalogEntry("Arts & Crafts Business", _G, ("art & craft", "creativity", "handmade")),
    "handicrafts": CatalogEntry("Handicrafts & Traditional Arts", _G, ("handicrafts", "traditional arts", "art & craft")),
    "jewelry making": CatalogEntry("Jewelry Design & Making", _G, ("jewelry making", "product design", "creativity")),
    "pottery": CatalogEntry("Pottery & Ceramics Studio", _G, ("pottery", "art & craft", "traditional arts")),
    "woodwork": CatalogEntry("Woodworking & Furniture", _G, ("woodwork", "product design", "manufacturing")),
    "embroidery": CatalogEntry("Embroidery & Textile Arts", _G, ("embroidery", "sewing", "fashion design")),
    "fashion design": CatalogEntry("Fashion Design Studio", _G, ("fashion design", "sewing", "pattern making")),
    "food preparation": CatalogEntry("Food Processing & Packaging", _G, ("food preparation", "cooking", "packaging")),
    "pattern making": CatalogEntry("Pattern Making & Design", _G, ("pattern making", "fashion design", "sewing")),
    "garment making": CatalogEntry("Garment Manufacturing", _G, ("garment making", "sewing", "fashion design")),
    "product design": CatalogEntry("Product Design & Development", _G, ("product design", "creativity", "manufacturing")),
    "manufacturing": CatalogEntry("Small Scale Manufacturing", _G, ("manufacturing", "product design", "quality control")),
    "quality control": CatalogEntry("Quality Assurance Services", _G, ("quality control", "manufacturing", "product design")),
    "packaging": CatalogEntry("Packaging & Gift Wrapping", _G, ("packaging", "product design", "creativity")),
    "traditional arts": CatalogEntry("Traditional Arts & Heritage Crafts", _G, ("traditional arts", "art & craft", "handicrafts")),

    # services
    "teaching": CatalogEntry("Education & Tutoring Services", _S, ("teaching", "tutoring", "education")),
    "tutoring": CatalogEntry("Private Tutoring & Coaching", _S, ("tutoring", "teaching", "education")),
    "beauty & makeup": CatalogEntry("Beauty & Makeup Services", _S, ("beauty & makeup", "skincare", "customer service")),
    "hair styling": CatalogEntry("Hair Styling & Salon Services", _S, ("hair styling", "beauty & makeup", "customer service")),
    "skincare": CatalogEntry("Skincare & Wellness Services", _S, ("skincare", "beauty & makeup", "healthcare")),
    "consulting": CatalogEntry("Professional Consulting Services", _S, ("consulting", "management", "communication")),
    "event planning": CatalogEntry("Event Planning & Management", _S, ("event planning", "management", "communication")),
    "training": CatalogEntry("Professional Training Services", _S, ("training", "teaching", "mentoring")),
    "mentoring": CatalogEntry("Mentoring & Coaching Services", _S, ("mentoring", "training", "counseling")),
    "counseling": CatalogEntry("Counseling & Therapy Services", _S, ("counseling", "mentoring", "healthcare")),
    "fitness training": CatalogEntry("Fitness & Personal Training", _S, ("fitness training", "healthcare", "training")),
    "healthcare": CatalogEntry("Healthcare & Wellness Services", _S, ("healthcare", "fitness training", "counseling")),
    "legal services": CatalogEntry("Legal Consultation Services", _S, ("legal services", "consulting", "communication")),
    "accounting": CatalogEntry("Accounting & Bookkeeping", _S, ("accounting", "management", "consulting")),
    "digital marketing": CatalogEntry("Digital Marketing Agency", _S, ("digital marketing", "social media", "content creation")),
    "content creation": CatalogEntry("Content Creation & Media", _S, ("content creation", "digital marketing", "photography")),

    # mixed
    "technology": CatalogEntry("Technology Solutions & IT Services", _B, ("technology", "digital marketing", "online")),
    "management": CatalogEntry("Business Management Consulting", _S, ("management", "consulting", "communication")),
    "sales": CatalogEntry("Sales & Business Development", _B, ("sales", "marketing", "customer service")),
    "writing": CatalogEntry("Writing & Content Services", _S, ("writing", "content creation", "communication")),
    "photography": CatalogEntry("Photography & Visual Services", _S, ("photography", "content creation", "art & craft")),
    "marketing": CatalogEntry("Marketing & Advertising Services", _S, ("marketing", "digital marketing", "sales")),
    "social media": CatalogEntry("Social Media Management", _S, ("social media", "digital marketing", "content creation")),
    "customer service": CatalogEntry("Customer Service Solutions", _S, ("customer service", "communication", "management")),
    "communication": CatalogEntry("Communication & PR Services", _S, ("communication", "marketing", "writing")),
})


# Keyword heuristics used when a skill has no catalog entry
GOODS_KEYWORDS: Tuple[str, ...] = (
    "making", "craft", "design", "production", "manufacturing",
    "baking", "cooking", "sewing", "pottery", "jewelry", "woodwork",
)
SERVICE_KEYWORDS: Tuple[str, ...] = (
    "training", "teaching", "consulting", "styling", "therapy",
    "coaching", "planning", "marketing", "healthcare",
)

# Companion keywords attached to every synthesized template
SYNTHESIZED_COMPANION_SKILLS: Tuple[str, ...] = ("customer service", "management")
