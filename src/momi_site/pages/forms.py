"""Contact and newsletter forms. Submissions are acknowledged, never delivered."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

INQUIRY_TYPES = {
    "general": "General Inquiry",
    "press": "Press & Media",
    "partnership": "Partnership",
    "careers": "Careers",
}

CONTACT_INFO = [
    ("General Inquiries", "info@symomi.cn", "For general questions and information"),
    ("Press & Media", "press@symomi.cn", "Press releases, media kits, and interviews"),
    ("Partnerships", "partners@symomi.cn", "Collaboration and partnership opportunities"),
    ("Careers", "careers@symomi.cn", "Join our creative team"),
]

OFFICES = [
    ("Paris", "Fashion District", "France", "CET"),
    ("Milan", "Design Quarter", "Italy", "CET"),
    ("Seoul", "Gangnam", "South Korea", "KST"),
    ("New York", "SoHo", "USA", "EST"),
]


@dataclass(frozen=True)
class ContactForm:
    name: str
    email: str
    subject: str
    message: str
    type: str = "general"


@dataclass(frozen=True)
class FormResult:
    status: str  # "success" or "error"
    message: str
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "success"


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email.strip()))


def validate_contact(form: ContactForm) -> list[str]:
    errors = []
    if not form.name.strip():
        errors.append("Name is required.")
    if not is_valid_email(form.email):
        errors.append("A valid email address is required.")
    if not form.message.strip():
        errors.append("Message is required.")
    if form.type not in INQUIRY_TYPES:
        errors.append(f"Unknown inquiry type: {form.type}")
    return errors


def submit_contact(form: ContactForm) -> FormResult:
    errors = validate_contact(form)
    if errors:
        return FormResult("error", "Please correct the highlighted fields.", tuple(errors))
    logger.info("Contact inquiry (%s) received from %s", form.type, form.email)
    return FormResult("success", "Thank you for your message. We will get back to you soon.")


def subscribe_newsletter(email: str) -> FormResult:
    if not is_valid_email(email):
        return FormResult("error", "Please enter a valid email address.")
    logger.info("Newsletter subscription for %s", email.strip())
    return FormResult("success", "Thank you for subscribing!")
