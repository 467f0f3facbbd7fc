"""Blog, FAQ, feature and generic content sections."""

from pydantic import BaseModel, Field

from ..registry import define_contract
from .common import alt_field


class BlogPostData(BaseModel):
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    category_id: str = ""
    category_label: str = ""
    author: str = ""
    publish_date: str = ""
    read_time: int = Field(default=0, ge=0)
    featured_image: str = ""
    featured_image_alt: str = alt_field()


class Faq(BaseModel):
    question: str = ""
    answer: str = ""
    order_index: int = Field(default=0, ge=0)
    show: bool = True


class FaqCategoryData(BaseModel):
    category_id: str = ""
    category_label: str = ""
    faqs: list[Faq] = Field(default_factory=list)


class FeatureHero(BaseModel):
    title: str = ""
    titleHighlight: str = ""
    subtitle: str = ""
    showTitle: bool = True
    showSubtitle: bool = True


class FeatureItem(BaseModel):
    title: str = ""
    description: str = ""
    icon: str = ""
    show: bool = True


class FeatureGroup(BaseModel):
    title: str = ""
    icon: str = ""
    color: str = ""
    image: str = ""
    imageAlt: str = alt_field()
    show: bool = True
    features: list[FeatureItem] = Field(default_factory=list)


class FeatureCta(BaseModel):
    title: str = ""
    subtitle: str = ""
    buttonText: str = ""
    show: bool = True


class FeatureCategoryData(BaseModel):
    hero: FeatureHero = Field(default_factory=FeatureHero)
    features: list[FeatureGroup] = Field(default_factory=list)
    cta: FeatureCta = Field(default_factory=FeatureCta)


class ProductFeature(BaseModel):
    icon: str = ""
    title: str = ""
    description: str = ""
    highlights: list[str] = Field(default_factory=list)
    image: str = ""
    imageAlt: str = alt_field()
    color: str = ""
    showHighlights: bool = True
    show: bool = True


class ProductFeaturesData(BaseModel):
    title: str = ""
    subtitle: str = ""
    showTitle: bool = True
    showSubtitle: bool = True
    highlightIcon: str = ""
    features: list[ProductFeature] = Field(default_factory=list)


class ContentItem(BaseModel):
    text: str = ""
    icon: str = ""
    show: bool = True


class ContentBlock(BaseModel):
    heading: str = ""
    content: str = ""
    items: list[ContentItem] = Field(default_factory=list)
    isImportant: bool = False
    show: bool = True


class ContentData(BaseModel):
    key: str = ""
    title: str = ""
    icon: str = ""
    showIcon: bool = True
    lastUpdated: str = ""
    sections: list[ContentBlock] = Field(default_factory=list)


CONTRACTS = [
    define_contract(
        "blog-post",
        BlogPostData,
        "Blog Post",
        "Blog post content section",
        icon="file-text",
        category="content",
    ),
    define_contract(
        "faq-category",
        FaqCategoryData,
        "FAQ Category",
        "Section displaying a category of frequently asked questions",
        icon="help-circle",
        category="content",
    ),
    define_contract(
        "feature-category",
        FeatureCategoryData,
        "Feature Category",
        "Section displaying a category of product features",
        icon="star",
        category="content",
    ),
    define_contract(
        "product-features",
        ProductFeaturesData,
        "Product Features",
        "Showcase key product features with icons, images, and highlights",
        icon="zap",
        category="content",
    ),
    define_contract(
        "content",
        ContentData,
        "Content",
        "Generic content section with flexible structure",
        icon="file",
        category="content",
    ),
]
