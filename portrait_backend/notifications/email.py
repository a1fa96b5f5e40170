"""
E-mails transactionnels via l'API REST Resend (POST /emails).

- Gabarits HTML jinja2 dans templates/emails
- send_booking_confirmation: confirmation après paiement (tâche post-commit)
- send_recovery_email: relance d'un brouillon abandonné, localisée (en, ru, es, ar, zh)
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from jinja2 import Environment, FileSystemLoader, select_autoescape

from portrait_backend import config
from portrait_backend.pricing.catalog import get_display_name
from portrait_backend.pricing.service import get_package_pricing
from portrait_backend.pricing.tax import format_money

logger = logging.getLogger(__name__)

EMAIL_TIMEOUT_SECONDS = 10

RECOVERY_LOCALES = ("en", "ru", "es", "ar", "zh")

RECOVERY_SUBJECTS = {
    "en": "Your Istanbul Photoshoot is Waiting! 📸",
    "ru": "Ваша фотосессия в Стамбуле ждет вас! 📸",
    "es": "¡Tu sesión de fotos en Estambul te espera! 📸",
    "ar": "جلسة التصوير الخاصة بك في إسطنبول بانتظارك! 📸",
    "zh": "您的伊斯坦布尔拍摄之旅正在等待！📸",
}

_env = Environment(
    loader=FileSystemLoader(str(config.TEMPLATES_DIR / "emails")),
    autoescape=select_autoescape(["html"]),
)


class EmailNotConfiguredError(RuntimeError):
    pass


class EmailSendError(RuntimeError):
    pass


def render(template_name: str, **context: Any) -> str:
    return _env.get_template(template_name).render(**context)


def send_email(to: List[str], subject: str, html: str, sender: Optional[str] = None) -> Dict[str, Any]:
    """
    Envoie un e-mail via Resend et retourne la réponse JSON ({"id": ...}).
    Lève EmailNotConfiguredError sans clé API, EmailSendError si Resend refuse.
    """
    if not config.RESEND_API_KEY:
        raise EmailNotConfiguredError("RESEND_API_KEY is not configured")
    res = requests.post(
        f"{config.RESEND_API_URL}/emails",
        json={"from": sender or config.EMAIL_FROM, "to": to, "subject": subject, "html": html},
        headers={"Authorization": f"Bearer {config.RESEND_API_KEY}"},
        timeout=EMAIL_TIMEOUT_SECONDS,
    )
    if not res.ok:
        raise EmailSendError(f"Resend rejected the e-mail: {res.status_code} {res.text[:300]}")
    return res.json()


def send_booking_confirmation(
    booking_id: str,
    customer_name: str,
    customer_email: str,
    package_id: str,
    booking_date: str,
    booking_time: str,
    total_amount: Any,
    locale: str = "en",
    people_count: Optional[int] = None,
) -> Dict[str, Any]:
    package_name = get_display_name(package_id)
    pricing = get_package_pricing(package_id, booking_date=booking_date, people_count=people_count)
    html = render(
        "booking_confirmation.html",
        booking_id=booking_id,
        customer_name=customer_name,
        package_name=package_name,
        booking_date=booking_date,
        booking_time=booking_time,
        people_count=people_count,
        total=format_money(total_amount, locale),
        base_price=format_money(pricing.base_price, locale),
        tax_amount=format_money(pricing.tax_amount, locale),
        tax_percent=int(pricing.tax_rate * 100),
    )
    data = send_email([customer_email], f"Booking Confirmation - {package_name}", html)
    logger.info("email: booking confirmation sent to=%s id=%s", customer_email, data.get("id"))
    return data


def recovery_locale(locale: Optional[str]) -> str:
    return locale if locale in RECOVERY_LOCALES else "en"


def send_recovery_email(draft: Dict[str, Any]) -> Dict[str, Any]:
    """Relance d'un brouillon: lien vers {BASE_URL}/{locale}/packages."""
    locale = recovery_locale(draft.get("locale"))
    html = render(
        f"recovery_{locale}.html",
        name=draft.get("user_name") or "",
        url=f"{config.BASE_URL}/{locale}/packages",
    )
    return send_email(
        [draft["user_email"]],
        RECOVERY_SUBJECTS[locale],
        html,
        sender=config.RECOVERY_EMAIL_FROM,
    )
