"""About and contact page sections."""

from typing import Optional

from pydantic import BaseModel, Field

from ..registry import define_contract
from .common import TitledBlock


class TimelineEvent(BaseModel):
    year: str = ""
    event: str = ""
    description: str = ""
    show: bool = True


class TimelineData(TitledBlock):
    itemIcon: str = ""
    showItemIcon: bool = True
    timeline: list[TimelineEvent] = Field(default_factory=list)


class Reason(BaseModel):
    icon: str = ""
    title: str = ""
    description: str = ""
    color: str = ""
    show: bool = True


class WhyJoinData(TitledBlock):
    items: list[Reason] = Field(default_factory=list)


class Value(BaseModel):
    icon: str = ""
    label: str = ""
    labelIcon: str = ""
    title: str = ""
    description: str = ""
    body: list[str] = Field(default_factory=list, description="One paragraph per entry")
    color: str = ""
    show: bool = True


class ValuesData(TitledBlock):
    useMissionVisionLayout: bool = False
    values: list[Value] = Field(default_factory=list)


class ContactHeroData(TitledBlock):
    pass


class ContactItem(BaseModel):
    icon: str = ""
    title: str = ""
    details: str = ""
    link: Optional[str] = None
    show: bool = True


class ContactInfoData(BaseModel):
    title: str = ""
    items: list[ContactItem] = Field(default_factory=list)


class ContactCard(BaseModel):
    icon: str = ""
    title: str = ""
    description: str = ""
    show: bool = True


class FaqLink(BaseModel):
    text: str = ""
    url: str = ""
    icon: str = ""
    title: str = ""
    description: str = ""
    show: bool = False


class ContactForm(BaseModel):
    title: str = ""
    required_indicator: str = ""
    name_label: str = ""
    name_placeholder: str = ""
    email_label: str = ""
    email_placeholder: str = ""
    subject_label: str = ""
    subject_placeholder: str = ""
    message_label: str = ""
    message_placeholder: str = ""
    submit_text: str = ""
    submit_icon: str = ""
    sending_text: str = ""
    success_title: str = ""
    success_message: str = ""
    success_icon: str = ""
    error_message: str = ""
    toast_success: str = ""
    toast_error: str = ""
    show: bool = True


class ContactInfoDetailsData(BaseModel):
    title: str = ""
    description: str = ""
    items: list[ContactCard] = Field(default_factory=list)
    faq_link: FaqLink = Field(default_factory=FaqLink)
    form: ContactForm = Field(default_factory=ContactForm)


CONTRACTS = [
    define_contract(
        "contact-hero",
        ContactHeroData,
        "Contact Hero",
        "Hero section for contact page",
        icon="mail",
        category="layout",
    ),
    define_contract(
        "contact-info",
        ContactInfoData,
        "Contact Info",
        "Section displaying contact information items",
        icon="phone",
        category="content",
    ),
    define_contract(
        "contact-info-details",
        ContactInfoDetailsData,
        "Contact Info Details",
        "Detailed contact information section with cards",
        icon="contact",
        category="content",
    ),
    define_contract(
        "timeline",
        TimelineData,
        "Timeline",
        "Timeline section displaying chronological events",
        icon="calendar",
        category="content",
    ),
    define_contract(
        "why-join",
        WhyJoinData,
        "Why Join",
        "Section displaying reasons to join",
        icon="users",
        category="content",
    ),
    define_contract(
        "values",
        ValuesData,
        "Values",
        "Section displaying company values",
        icon="heart",
        category="content",
    ),
]
