"""
Schémas d'entrée (pydantic) et machine d'états des réservations.

Les champs sont en snake_case côté Python et en camelCase sur le fil (alias).
"""
from enum import Enum
from decimal import Decimal
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from portrait_backend.pricing.catalog import MAX_PEOPLE, PACKAGE_PRICES, is_per_person

MAX_PAYMENT_AMOUNT = Decimal("10000")


class BookingStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# Les statuts n'avancent que dans ce sens; cancelled et completed sont terminaux
ALLOWED_TRANSITIONS = {
    BookingStatus.DRAFT: {BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.CANCELLED: set(),
    BookingStatus.COMPLETED: set(),
}


def can_transition(current: str, target: str) -> bool:
    try:
        return BookingStatus(target) in ALLOWED_TRANSITIONS[BookingStatus(current)]
    except ValueError:
        return False


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingFields(CamelModel):
    package_id: str = Field(min_length=1)
    customer_name: str = Field(min_length=2)
    customer_email: EmailStr
    customer_phone: str = Field(min_length=1)
    booking_date: str = Field(min_length=1)
    booking_time: str = Field(min_length=1)
    notes: Optional[str] = None
    total_amount: Decimal = Field(gt=0)
    people_count: Optional[int] = Field(default=None, ge=1, le=MAX_PEOPLE)

    @field_validator("package_id")
    def known_package(cls, v: str) -> str:
        if v not in PACKAGE_PRICES:
            raise ValueError("Invalid package ID")
        return v

    @model_validator(mode="after")
    def people_count_for_per_person_packages(self):
        if is_per_person(self.package_id) and self.people_count is None:
            raise ValueError("peopleCount is required for this package")
        return self


def _to_optional_str(v: Any) -> Optional[str]:
    if v is None or v == "":
        return None
    return str(v)


class ConfirmedBookingRequest(BookingFields):
    payment_id: Optional[str] = None
    conversation_id: Optional[str] = None
    provider: Literal["iyzico", "turinvoice"] = "iyzico"
    provider_response: Optional[Dict[str, Any]] = None
    booking_id: Optional[str] = None
    event_id: Optional[str] = None
    locale: str = "en"

    @field_validator("payment_id", "conversation_id", "booking_id", mode="before")
    def coerce_ids(cls, v: Any) -> Optional[str]:
        # Turinvoice renvoie des identifiants numériques
        return _to_optional_str(v)


class DraftBookingRequest(BookingFields):
    locale: str = "en"


class CardData(CamelModel):
    card_holder_name: str = Field(min_length=2)
    card_number: str = Field(min_length=1)
    expire_month: str = Field(min_length=2, max_length=2)
    expire_year: str = Field(min_length=2, max_length=4)
    cvc: str = Field(min_length=3, max_length=4)

    @field_validator("card_number")
    def card_number_digits(cls, v: str) -> str:
        digits = "".join(ch for ch in v if ch.isdigit())
        if not 13 <= len(digits) <= 19:
            raise ValueError("Invalid card number")
        return digits


class CheckoutRequest(BookingFields):
    provider: Literal["iyzico", "turinvoice"] = "iyzico"
    card: Optional[CardData] = None
    booking_id: Optional[str] = None
    event_id: Optional[str] = None
    locale: str = "en"

    @field_validator("booking_id", mode="before")
    def coerce_booking_id(cls, v: Any) -> Optional[str]:
        return _to_optional_str(v)

    @model_validator(mode="after")
    def card_required_for_card_provider(self):
        if self.provider == "iyzico" and self.card is None:
            raise ValueError("Card details are required for card payments")
        return self


class CustomerData(CamelModel):
    customer_name: str = Field(min_length=2)
    customer_email: EmailStr
    customer_phone: str = Field(min_length=1)
    booking_date: Optional[str] = None
    people_count: Optional[int] = Field(default=None, ge=1, le=MAX_PEOPLE)


class PaymentInitRequest(CamelModel):
    payment_data: CardData
    customer_data: CustomerData
    amount: Decimal = Field(gt=0, le=MAX_PAYMENT_AMOUNT)
    package_id: str
    locale: str = "en"

    @field_validator("package_id")
    def known_package(cls, v: str) -> str:
        if v not in PACKAGE_PRICES:
            raise ValueError("Invalid package ID")
        return v


class TurinvoiceInitRequest(CamelModel):
    customer_data: CustomerData
    amount: Decimal = Field(gt=0, le=MAX_PAYMENT_AMOUNT)
    package_id: str
    locale: str = "en"

    @field_validator("package_id")
    def known_package(cls, v: str) -> str:
        if v not in PACKAGE_PRICES:
            raise ValueError("Invalid package ID")
        return v


class TurinvoiceWebhook(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    state: str = Field(min_length=1)
    secret_key: str = Field(min_length=1)
    amount: Optional[Decimal] = None

    @field_validator("id", mode="before")
    def coerce_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v
