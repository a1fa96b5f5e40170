"""
Cas d'usage 'bookings': orchestre tarification, fournisseurs de paiement, persistance
et tâches post-commit.

Ordre d'une tentative de paiement (checkout):
  1) valider le montant soumis contre le montant recalculé (tolérance 0.01)
  2) initialiser le paiement auprès du fournisseur, avant toute écriture en base
  3) échec -> PaymentError localisée, rien n'est persisté
     attente (Turinvoice) -> URL de paiement, persistance à la confirmation
  4) succès -> client, réservation 'confirmed', ligne de paiement
  5) e-mail, audience, événement Facebook en tâches post-commit
"""
from decimal import Decimal
from typing import Any, Dict, Optional
import logging

from portrait_backend import config
from portrait_backend.notifications import email as email_notifications
from portrait_backend.notifications import marketing
from portrait_backend.notifications.tasks import PostCommitTasks
from portrait_backend.payments import (
    PROVIDER_IYZICO,
    PROVIDER_TURINVOICE,
    Card,
    Customer,
    ProviderConfigurationError,
    ProviderNetworkError,
    ProviderResult,
    TurinvoiceError,
    get_error_message,
    get_provider,
    new_conversation_id,
)
from portrait_backend.pricing import PriceBreakdown, amount_matches, get_package_pricing, is_per_person
from portrait_backend.utils.errors import (
    AuthenticationError,
    ConflictError,
    PaymentError,
    PaymentProviderUnavailableError,
    ValidationError,
    log_error,
)
from . import repository
from .models import (
    BookingFields,
    BookingStatus,
    CardData,
    CheckoutRequest,
    ConfirmedBookingRequest,
    DraftBookingRequest,
    PaymentInitRequest,
    TurinvoiceInitRequest,
    TurinvoiceWebhook,
    can_transition,
)

logger = logging.getLogger(__name__)

CURRENCY = "EUR"
AMOUNT_MISMATCH_MESSAGE = "Amount does not match package price"
DEPOSIT_MISMATCH_MESSAGE = "Amount does not match required deposit amount"
DUPLICATE_BOOKING_MESSAGE = (
    "A similar booking was recently created. Please check your email or wait a few minutes."
)


# --- validation / montants ---

def validate_amount(
    package_id: str,
    submitted: Decimal,
    booking_date: Optional[str] = None,
    people_count: Optional[int] = None,
    expect_deposit: bool = False,
) -> PriceBreakdown:
    """
    Recalcule la ventilation côté serveur et la compare au montant soumis.
    Lève ValidationError si l'écart dépasse 0.01.
    """
    pricing = get_package_pricing(package_id, booking_date=booking_date, people_count=people_count)
    expected = pricing.deposit_amount if expect_deposit else pricing.total_price
    if not amount_matches(submitted, expected):
        log_error(
            ValidationError(AMOUNT_MISMATCH_MESSAGE),
            {
                "action": "price_validation",
                "package_id": package_id,
                "provided_amount": str(submitted),
                "expected_amount": str(expected),
            },
        )
        raise ValidationError(DEPOSIT_MISMATCH_MESSAGE if expect_deposit else AMOUNT_MISMATCH_MESSAGE)
    return pricing


def charge_amount(provider: str, pricing: PriceBreakdown) -> Decimal:
    # Carte: totalité; facture TRY: acompte
    return pricing.deposit_amount if provider == PROVIDER_TURINVOICE else pricing.total_price


def _customer(name: str, email: str, phone: str, ip: str, locale: str) -> Customer:
    return Customer(name=name, email=str(email), phone=phone, ip=ip, locale=locale)


def _card(card: CardData) -> Card:
    return Card(
        holder_name=card.card_holder_name,
        number=card.card_number,
        expire_month=card.expire_month,
        expire_year=card.expire_year,
        cvc=card.cvc,
    )


def payment_failure(result: ProviderResult, locale: str) -> PaymentError:
    mapped = get_error_message(result.error_code, locale)
    logger.info(
        "bookings.service payment declined provider=%s code=%s category=%s",
        result.provider, result.error_code, mapped["category"],
    )
    return PaymentError(
        mapped["message"],
        error_code=result.error_code,
        category=mapped["category"],
        suggestion=mapped["suggestion"],
    )


def initialize_payment(
    provider_name: str,
    amount: Decimal,
    customer: Customer,
    card: Optional[Card] = None,
    context: Optional[Dict[str, Any]] = None,
) -> ProviderResult:
    """
    Appelle l'adaptateur. Un échec de connexion avant réponse est retenté une fois;
    timeouts et échecs réseau persistants deviennent PaymentProviderUnavailableError.
    Les refus métier sont renvoyés tels quels (status=failure).
    """
    provider = get_provider(provider_name)
    attempts = 0
    while True:
        attempts += 1
        try:
            return provider.initialize(amount, CURRENCY, customer, card=card, context=context)
        except ProviderNetworkError as e:
            if e.retryable and attempts < 2:
                logger.warning("bookings.service %s connection failed, retrying once", provider_name)
                continue
            log_error(e, {"action": "payment_initialize", "provider": provider_name, "attempts": attempts})
            raise PaymentProviderUnavailableError() from e
        except ProviderConfigurationError as e:
            log_error(e, {"action": "payment_initialize", "provider": provider_name})
            raise PaymentProviderUnavailableError() from e


# --- persistance ---

def booking_row(fields: BookingFields, status: BookingStatus, total_amount: Optional[Decimal] = None) -> Dict[str, Any]:
    return {
        "package_id": fields.package_id,
        "user_name": fields.customer_name,
        "user_email": str(fields.customer_email),
        "user_phone": fields.customer_phone,
        "booking_date": fields.booking_date,
        "booking_time": fields.booking_time,
        "status": status.value,
        "total_amount": float(total_amount if total_amount is not None else fields.total_amount),
        "notes": fields.notes or None,
        "people_count": fields.people_count if is_per_person(fields.package_id) else None,
    }


def booking_response(row: Dict[str, Any], payment_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": row.get("id"),
        "packageId": row.get("package_id"),
        "customerName": row.get("user_name"),
        "customerEmail": row.get("user_email"),
        "customerPhone": row.get("user_phone"),
        "bookingDate": row.get("booking_date"),
        "bookingTime": row.get("booking_time"),
        "totalAmount": row.get("total_amount"),
        "status": row.get("status"),
        "paymentId": payment_id,
        "peopleCount": row.get("people_count"),
    }


def persist_confirmed(
    fields: BookingFields,
    booking_id: Optional[str],
    total_amount: Decimal,
    payment_fields: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Écrit client, réservation confirmée puis paiement.
    Seule l'écriture de la réservation peut échouer (DatabaseConnectionError).
    """
    repository.upsert_customer(str(fields.customer_email), fields.customer_name, fields.customer_phone)
    booking = repository.create_or_update_booking(
        booking_id, booking_row(fields, BookingStatus.CONFIRMED, total_amount)
    )
    payment = repository.insert_payment(booking["id"], payment_fields)
    if payment is None:
        logger.warning("bookings.service payment row missing for booking_id=%s", booking["id"])
    logger.info("bookings.service booking confirmed booking_id=%s provider=%s", booking["id"], payment_fields.get("provider"))
    return booking


def schedule_fan_out(
    tasks: PostCommitTasks,
    booking: Dict[str, Any],
    fields: BookingFields,
    charged_amount: Decimal,
    transaction_id: str,
    event_id: Optional[str] = None,
    locale: str = "en",
) -> None:
    tasks.add(
        "confirmation_email",
        email_notifications.send_booking_confirmation,
        str(booking["id"]),
        fields.customer_name,
        str(fields.customer_email),
        fields.package_id,
        fields.booking_date,
        fields.booking_time,
        booking.get("total_amount", fields.total_amount),
        locale=locale,
        people_count=fields.people_count,
    )
    first_name, _, last_name = fields.customer_name.partition(" ")
    tasks.add("audience_sync", marketing.add_contact_to_audience, str(fields.customer_email), first_name, last_name)
    tasks.add(
        "facebook_purchase",
        marketing.track_facebook_purchase,
        str(fields.customer_email),
        fields.customer_phone,
        fields.package_id,
        float(charged_amount),
        transaction_id,
        event_id,
    )


# --- cas d'usage ---

def checkout(req: CheckoutRequest, client_ip: str, tasks: PostCommitTasks) -> Dict[str, Any]:
    pricing = validate_amount(req.package_id, req.total_amount, req.booking_date, req.people_count)
    amount = charge_amount(req.provider, pricing)
    customer = _customer(req.customer_name, req.customer_email, req.customer_phone, client_ip, req.locale)
    context = {
        "conversation_id": new_conversation_id(),
        "package_id": req.package_id,
        "display_name": pricing.display_name,
        "redirect_url": f"{config.BASE_URL}/{req.locale}/checkout?success=true",
    }
    card = _card(req.card) if req.card is not None else None

    result = initialize_payment(req.provider, amount, customer, card=card, context=context)

    if result.status == "pending":
        return {
            "success": True,
            "status": "pending",
            "payment": {
                "provider": result.provider,
                "idOrder": result.provider_order_id,
                "paymentUrl": result.payment_url,
                "amount": float(result.amount),
                "currency": result.currency,
                **result.extra,
            },
        }
    if not result.succeeded:
        raise payment_failure(result, req.locale)

    booking = persist_confirmed(
        req,
        req.booking_id,
        pricing.total_price,
        {
            "payment_id": result.provider_payment_id,
            "conversation_id": result.provider_order_id,
            "status": "success",
            "amount": float(result.amount),
            "currency": result.currency,
            "provider": result.provider,
            "provider_response": result.tagged_response(),
        },
    )
    schedule_fan_out(
        tasks, booking, req, result.amount,
        result.provider_payment_id or str(booking["id"]), req.event_id, req.locale,
    )
    return {"success": True, "booking": booking_response(booking, result.provider_payment_id)}


def create_confirmed_booking(req: ConfirmedBookingRequest, tasks: PostCommitTasks) -> Dict[str, Any]:
    """
    Confirmation après une étape de paiement pilotée par le client
    (/payment/initialize ou commande Turinvoice payée).
    Le paiement est toujours revérifié auprès du fournisseur avant toute écriture.
    """
    if not req.payment_id or not req.conversation_id:
        raise ValidationError("Payment information required")
    pricing = validate_amount(req.package_id, req.total_amount, req.booking_date, req.people_count)
    charged = charge_amount(req.provider, pricing)

    # Carte: recherche par paymentId; facture TRY: par identifiant de commande
    order_id = req.conversation_id if req.provider == PROVIDER_TURINVOICE else req.payment_id
    status = _status_or_unavailable(req.provider, order_id)
    if not status.paid:
        log_error(
            ValidationError("Payment has not been completed"),
            {"action": "payment_verification", "provider": req.provider, "order_id": order_id, "state": status.state},
        )
        raise ValidationError("Payment has not been completed")

    booking = persist_confirmed(
        req,
        req.booking_id,
        pricing.total_price,
        {
            "payment_id": req.payment_id,
            "conversation_id": req.conversation_id,
            "status": "success",
            "amount": float(charged),
            "currency": CURRENCY,
            "provider": req.provider,
            "provider_response": {"provider": req.provider, "raw": req.provider_response or {}},
        },
    )
    schedule_fan_out(tasks, booking, req, charged, req.payment_id, req.event_id, req.locale)
    return {"success": True, "booking": booking_response(booking, req.payment_id)}


def create_draft(req: DraftBookingRequest) -> Dict[str, Any]:
    pricing = get_package_pricing(req.package_id, booking_date=req.booking_date, people_count=req.people_count)
    repository.upsert_customer(str(req.customer_email), req.customer_name, req.customer_phone)
    row = booking_row(req, BookingStatus.DRAFT, pricing.total_price)
    row.update({"locale": req.locale, "abandoned_email_sent": False})
    booking = repository.insert_booking(row)
    return {"success": True, "bookingId": booking["id"]}


def create_pending_booking(req: BookingFields) -> Dict[str, Any]:
    """Demande de réservation sans paiement; doublon récent (5 min) -> 409."""
    validate_amount(req.package_id, req.total_amount, req.booking_date, req.people_count)
    if repository.find_recent_duplicate(str(req.customer_email), req.package_id, req.booking_date, req.booking_time):
        raise ConflictError(DUPLICATE_BOOKING_MESSAGE)
    repository.upsert_customer(str(req.customer_email), req.customer_name, req.customer_phone)
    booking = repository.insert_booking(booking_row(req, BookingStatus.PENDING))
    response = booking_response(booking)
    response.pop("paymentId")
    return {"success": True, "booking": response}


def initialize_card_payment(req: PaymentInitRequest, client_ip: str) -> Dict[str, Any]:
    data = req.customer_data
    pricing = validate_amount(req.package_id, req.amount, data.booking_date, data.people_count)
    customer = _customer(data.customer_name, data.customer_email, data.customer_phone, client_ip, req.locale)
    result = initialize_payment(
        PROVIDER_IYZICO,
        pricing.total_price,
        customer,
        card=_card(req.payment_data),
        context={
            "conversation_id": new_conversation_id(),
            "package_id": req.package_id,
            "display_name": pricing.display_name,
        },
    )
    if not result.succeeded:
        raise payment_failure(result, req.locale)
    return {
        "success": True,
        "status": "success",
        "paymentId": result.provider_payment_id,
        "conversationId": result.provider_order_id,
    }


def initialize_turinvoice_payment(req: TurinvoiceInitRequest, client_ip: str) -> Dict[str, Any]:
    data = req.customer_data
    pricing = validate_amount(
        req.package_id, req.amount, data.booking_date, data.people_count, expect_deposit=True
    )
    customer = _customer(data.customer_name, data.customer_email, data.customer_phone, client_ip, req.locale)
    result = initialize_payment(
        PROVIDER_TURINVOICE,
        pricing.deposit_amount,
        customer,
        context={
            "package_id": req.package_id,
            "redirect_url": f"{config.BASE_URL}/{req.locale}/checkout?success=true",
        },
    )
    if result.status != "pending":
        raise payment_failure(result, req.locale)
    return {
        "success": True,
        "idOrder": result.provider_order_id,
        "paymentUrl": result.payment_url,
        "amountEUR": result.extra.get("amountEUR"),
        "amountTRY": result.extra.get("amountTRY"),
        "exchangeRate": result.extra.get("exchangeRate"),
        "currency": "TRY",
        "state": result.extra.get("state"),
    }


def _status_or_unavailable(provider_name: str, order_id: str):
    try:
        return get_provider(provider_name).get_status(order_id)
    except (ProviderNetworkError, ProviderConfigurationError, TurinvoiceError) as e:
        log_error(e, {"action": "payment_status", "provider": provider_name, "order_id": order_id})
        raise PaymentProviderUnavailableError() from e


def turinvoice_status(order_id: Optional[str]) -> Dict[str, Any]:
    if not order_id:
        raise ValidationError("Missing order ID")
    status = _status_or_unavailable(PROVIDER_TURINVOICE, order_id)
    order = status.raw
    return {
        "success": True,
        "idOrder": order.get("id", status.order_id),
        "state": status.state,
        "amount": order.get("amount"),
        "currency": order.get("currency"),
        "datePay": order.get("datePay"),
        "paymentUrl": order.get("paymentUrl"),
    }


def handle_turinvoice_webhook(payload: TurinvoiceWebhook, tasks: PostCommitTasks) -> Dict[str, Any]:
    """
    Callback serveur à serveur de Turinvoice.
    - secret invalide -> 401
    - état != paid -> accusé de réception sans écriture
    - paiement inconnu -> accusé de réception (la confirmation client créera les lignes)
    - sinon: paiement 'success', réservation 'confirmed' si la transition est permise,
      e-mail de confirmation uniquement si la réservation vient d'être confirmée
    """
    provider = get_provider(PROVIDER_TURINVOICE)
    if not provider.verify_webhook(payload.secret_key):
        log_error(AuthenticationError("Invalid webhook secret key"), {"action": "turinvoice_webhook", "order_id": payload.id})
        raise AuthenticationError("Invalid webhook secret key")

    if payload.state != "paid":
        return {"success": True, "message": "Webhook received, but payment not completed yet"}

    payment = repository.find_payment_by_order(PROVIDER_TURINVOICE, payload.id)
    if payment is None:
        logger.info("bookings.service webhook for unknown turinvoice order id=%s", payload.id)
        return {"success": True, "message": "Payment record not found, will be created by frontend"}

    raw = payload.model_dump(mode="json", exclude={"secret_key"})
    repository.update_payment(payment["id"], {
        "status": "success",
        "provider_response": {"provider": PROVIDER_TURINVOICE, "raw": raw},
    })

    booking_id = payment.get("booking_id")
    booking = repository.get_booking(booking_id) if booking_id else None
    if booking and can_transition(booking.get("status", ""), BookingStatus.CONFIRMED.value):
        booking = repository.update_booking(booking_id, {"status": BookingStatus.CONFIRMED.value})
        tasks.add(
            "confirmation_email",
            email_notifications.send_booking_confirmation,
            str(booking["id"]),
            booking.get("user_name"),
            booking.get("user_email"),
            booking.get("package_id"),
            booking.get("booking_date"),
            booking.get("booking_time"),
            booking.get("total_amount"),
            locale=booking.get("locale") or "en",
            people_count=booking.get("people_count"),
        )
    return {"success": True, "message": "Payment processed successfully"}
