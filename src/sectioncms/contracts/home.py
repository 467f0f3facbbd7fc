"""Home page sections."""

from pydantic import BaseModel, Field

from ..registry import define_contract
from .common import Badge, IconText, ImageItem, Platform, TitledBlock, alt_field, icon_field


class HeroImages(BaseModel):
    women: list[ImageItem] = Field(default_factory=list)
    men: list[ImageItem] = Field(default_factory=list)
    grid: list[ImageItem] = Field(default_factory=list)


class HeroCta(BaseModel):
    text: str = ""
    buttonText: str = ""
    link: str = ""
    subtext: str = ""
    badge: str = ""
    icon: str = ""
    show: bool = True
    showBadge: bool = False
    showSubtext: bool = False


class HeroDecorative(BaseModel):
    icon: str = ""
    show: bool = False
    showParticles: bool = False


class FloatingBadge(BaseModel):
    value: str = ""
    label: str = ""
    icon: str = ""
    show: bool = False


class HeroData(BaseModel):
    title: str = ""
    titleHighlight: str = ""
    tagline: str = ""
    subtitle: str = ""
    description: str = ""
    showTagline: bool = True
    showSubtitle: bool = True
    showDescription: bool = True
    badge: Badge = Field(default_factory=Badge)
    stats: list[IconText] = Field(default_factory=list)
    images: HeroImages = Field(default_factory=HeroImages)
    cta: HeroCta = Field(default_factory=HeroCta)
    decorative: HeroDecorative = Field(default_factory=HeroDecorative)
    floatingBadge: FloatingBadge = Field(default_factory=FloatingBadge)


class Step(BaseModel):
    step: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    imageAlt: str = alt_field()
    showImage: bool = True
    showBadge: bool = True


class HowItWorksData(BaseModel):
    title: str = ""
    titleHighlight: str = ""
    showTitle: bool = True
    steps: list[Step] = Field(default_factory=list)


class GalleryImage(BaseModel):
    image: str
    alt: str = ""
    title: str = ""
    story: str = Field(default="", json_schema_extra={"widget": "long_text"})


class GalleryCta(BaseModel):
    text: str = ""
    highlight: str = ""
    show: bool = False


class SuccessBadge(BaseModel):
    text: str = ""
    show: bool = False


class GalleryIcons(BaseModel):
    badge: str = icon_field()
    story: str = icon_field()


class GalleryData(TitledBlock):
    images: list[GalleryImage] = Field(default_factory=list)
    cta: GalleryCta = Field(default_factory=GalleryCta)
    successBadge: SuccessBadge = Field(default_factory=SuccessBadge)
    icons: GalleryIcons = Field(default_factory=GalleryIcons)


class Testimonial(BaseModel):
    name: str = ""
    image: str = ""
    imageAlt: str = alt_field()
    text: str = Field(default="", json_schema_extra={"widget": "long_text"})
    location: str = ""
    rating: int = Field(default=0, ge=0, le=5)
    date: str = ""
    showRating: bool = True


class TestimonialIcons(BaseModel):
    quote: str = icon_field()
    heart: str = icon_field()
    rating: str = icon_field()


class TestimonialsData(TitledBlock):
    testimonials: list[Testimonial] = Field(default_factory=list)
    stats: IconText = Field(default_factory=lambda: IconText(show=False))
    icons: TestimonialIcons = Field(default_factory=TestimonialIcons)


class Benefit(BaseModel):
    text: str = ""
    icon: str = ""
    showIcon: bool = True


class AppDownloadCta(BaseModel):
    text: str = ""
    subtext: str = ""
    icon: str = ""
    show: bool = True
    showSubtext: bool = False
    secondaryText: str = ""
    secondaryLink: str = ""
    secondaryIcon: str = ""
    showSecondary: bool = False


class DownloadCard(BaseModel):
    title: str = ""
    subtitle: str = ""
    icon: str = ""
    show: bool = False
    platformsLabel: str = ""
    showPlatforms: bool = False
    statsPrefix: str = ""
    statsHighlight: str = ""
    statsSuffix: str = ""
    showStats: bool = False


class DecorativeImages(BaseModel):
    decorative: list[ImageItem] = Field(default_factory=list)


class AppDownloadData(BaseModel):
    title: str = ""
    subtitle: str = ""
    badge: Badge = Field(default_factory=Badge)
    benefits: list[Benefit] = Field(default_factory=list)
    showBenefits: bool = True
    cta: AppDownloadCta = Field(default_factory=AppDownloadCta)
    card: DownloadCard = Field(default_factory=DownloadCard)
    platforms: list[Platform] = Field(default_factory=list)
    images: DecorativeImages = Field(default_factory=DecorativeImages)


class ComingSoonCta(BaseModel):
    text: str = ""
    icon: str = ""
    link: str = ""
    show: bool = True


class Callout(BaseModel):
    title: str = ""
    description: str = ""
    show: bool = True


class ComingSoonStats(BaseModel):
    prefix: str = ""
    highlight: str = ""
    suffix: str = ""
    icon: str = ""
    show: bool = False


class ComingSoonData(BaseModel):
    title: str = ""
    subtitle: str = ""
    badge: Badge = Field(default_factory=Badge)
    cta: ComingSoonCta = Field(default_factory=ComingSoonCta)
    callout: Callout = Field(default_factory=Callout)
    footer_note: str = ""
    platforms: list[Platform] = Field(default_factory=list)
    showPlatforms: bool = True
    stats: ComingSoonStats = Field(default_factory=ComingSoonStats)
    screenshots: list[ImageItem] = Field(default_factory=list)
    showScreenshots: bool = True


CONTRACTS = [
    define_contract(
        "hero",
        HeroData,
        "Hero Section",
        "Main hero section with title, subtitle, CTA, and background images",
        icon="sparkles",
        category="layout",
    ),
    define_contract(
        "how-it-works",
        HowItWorksData,
        "How It Works",
        "Step-by-step explanation section",
        icon="play-circle",
        category="content",
    ),
    define_contract(
        "gallery",
        GalleryData,
        "Gallery",
        "Image gallery section with carousel",
        icon="image",
        category="media",
    ),
    define_contract(
        "testimonials",
        TestimonialsData,
        "Testimonials",
        "Customer testimonials and reviews section",
        icon="quote",
        category="social",
    ),
    define_contract(
        "app-download",
        AppDownloadData,
        "App Download",
        "App download section with platform links",
        icon="download",
        category="cta",
    ),
    define_contract(
        "coming-soon",
        ComingSoonData,
        "Coming Soon",
        "Coming soon section with platform availability",
        icon="clock",
        category="cta",
    ),
]
