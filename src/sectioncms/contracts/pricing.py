"""Pricing page sections."""

from pydantic import BaseModel, Field

from ..registry import define_contract
from .common import Badge


class Plan(BaseModel):
    icon: str = ""
    name: str = ""
    price: float = Field(default=0, ge=0)
    currency: str = ""
    billing_period: str = ""
    description: str = ""
    features: list[str] = Field(default_factory=list)
    featureIcon: str = ""
    showFeatures: bool = True
    is_popular: bool = False
    order_index: int = Field(default=0, ge=0)


class PricingPlansData(BaseModel):
    plans: list[Plan] = Field(default_factory=list)


class PricingHeroData(BaseModel):
    title: str = ""
    titleHighlight: str = ""
    subtitle: str = ""
    showTitle: bool = True
    showSubtitle: bool = True
    badge: Badge = Field(default_factory=Badge)


class FreeMessagesData(BaseModel):
    count: int = Field(default=0, ge=0)
    title: str = ""
    description: str = ""
    icon: str = ""
    show: bool = True
    showIcon: bool = True


class Bundle(BaseModel):
    messages: int = Field(default=0, ge=0)
    popular: bool = False
    label: str = ""
    show: bool = True


class BundleLabels(BaseModel):
    popular: str = ""
    messages: str = ""
    customBundleTitle: str = ""
    customBundleSubtitle: str = ""
    quantityLabel: str = ""
    basePriceLabel: str = ""
    gstLabel: str = ""
    totalLabel: str = ""
    purchaseLabel: str = ""


class MessageBundlesData(BaseModel):
    price_per_message: float = Field(default=0, ge=0)
    gst_rate: float = Field(default=0, ge=0, le=100)
    currencySymbol: str = ""
    icon: str = ""
    showIcon: bool = True
    show: bool = True
    bundles: list[Bundle] = Field(default_factory=list)
    min_messages: int = Field(default=0, ge=0)
    max_messages: int = Field(default=0, ge=0)
    title: str = ""
    subtitle: str = ""
    labels: BundleLabels = Field(default_factory=BundleLabels)


class PricingInfoData(BaseModel):
    title: str = ""
    items: list[str] = Field(default_factory=list)
    icon: str = ""
    itemIcon: str = ""
    show: bool = True
    showIcon: bool = True
    showItemIcon: bool = True


class PricingFaq(BaseModel):
    question: str = ""
    answer: str = ""
    show: bool = True


class PricingFaqCta(BaseModel):
    text: str = ""
    link: str = ""
    buttonText: str = ""
    show: bool = False


class PricingFaqData(BaseModel):
    title: str = ""
    faqs: list[PricingFaq] = Field(default_factory=list)
    cta: PricingFaqCta = Field(default_factory=PricingFaqCta)


CONTRACTS = [
    define_contract(
        "pricing-plans",
        PricingPlansData,
        "Pricing Plans",
        "Section displaying pricing plan options",
        icon="credit-card",
        category="commerce",
    ),
    define_contract(
        "pricing-hero",
        PricingHeroData,
        "Pricing Hero",
        "Hero section for pricing page",
        icon="tag",
        category="commerce",
    ),
    define_contract(
        "free-messages",
        FreeMessagesData,
        "Free Messages",
        "Section displaying free message count information",
        icon="message-circle",
        category="commerce",
    ),
    define_contract(
        "message-bundles",
        MessageBundlesData,
        "Message Bundles",
        "Section displaying message bundle pricing options",
        icon="package",
        category="commerce",
    ),
    define_contract(
        "pricing-info",
        PricingInfoData,
        "Pricing Info",
        "Section displaying pricing information and details",
        icon="info",
        category="commerce",
    ),
    define_contract(
        "pricing-faq",
        PricingFaqData,
        "Pricing FAQ",
        "Section displaying frequently asked questions about pricing",
        icon="help-circle",
        category="commerce",
    ),
]
