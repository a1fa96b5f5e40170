"""
Catalogue statique des formules photo (prix TTC en EUR).
Défini dans le code, jamais en base.
"""
from decimal import Decimal
from typing import Dict, List

PACKAGE_PRICES: Dict[str, Decimal] = {
    "essential": Decimal("150"),
    "premium": Decimal("280"),
    "luxury": Decimal("450"),
    "rooftop": Decimal("150"),
}

DISPLAY_NAMES: Dict[str, str] = {
    "essential": "Essential Package",
    "premium": "Premium Package",
    "luxury": "Luxury Package",
    "rooftop": "Rooftop Package",
}

# Seule la formule rooftop est facturée par personne
PER_PERSON_PACKAGES = frozenset({"rooftop"})

MAX_PEOPLE = 10


def package_ids() -> List[str]:
    return list(PACKAGE_PRICES.keys())


def is_per_person(package_id: str) -> bool:
    return package_id in PER_PERSON_PACKAGES


def get_package_price(package_id: str) -> Decimal:
    # KeyError pour un identifiant inconnu: erreur de programmation
    return PACKAGE_PRICES[package_id]


def get_display_name(package_id: str) -> str:
    return DISPLAY_NAMES[package_id]
