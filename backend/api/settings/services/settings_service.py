"""Settings service — business logic."""

import logging
from types import MappingProxyType
from typing import Any
from urllib.parse import urljoin

from config import FILES_UPLOAD_URL
from errors import ValidationError
from api.settings.dto.settings import SettingsResponse
from api.settings.repositories import settings_repository
from utils.parse import parse_boolean, parse_positive_number, parse_string

logger = logging.getLogger(__name__)


SETTINGS_DEFAULTS = MappingProxyType({
    "domain": "",
    "logo_file": None,
    "language": "en",
    "currency_code": "USD",
    "currency_symbol": "$",
    "currency_format": "${amount}",
    "thousand_separator": ",",
    "decimal_separator": ".",
    "decimal_number": 2,
    "timezone": "Asia/Singapore",
    "date_format": "MMMM D, YYYY",
    "time_format": "h:mm a",
    "default_shipping_country": "SG",
    "default_shipping_state": "",
    "default_shipping_city": "",
    "default_product_sorting": "stock_status,price,position",
    "product_fields": (
        "path,id,name,category_id,category_name,sku,images,enabled,discontinued,"
        "stock_status,stock_quantity,price,on_sale,regular_price,attributes,tags,position"
    ),
    "products_limit": 30,
    "weight_unit": "kg",
    "length_unit": "cm",
    "hide_billing_address": False,
    "order_confirmation_copy_to": "",
})

COERCERS = {
    "string": parse_string,
    "non_negative_number": lambda value: parse_positive_number(value) or 0,
    # Invalid input is stored as None, there is no fallback here
    "positive_number": parse_positive_number,
    "boolean": lambda value: parse_boolean(value, False),
}

FIELD_RULES = {
    "domain": "string",
    "logo_file": "string",
    "language": "string",
    "currency_code": "string",
    "currency_symbol": "string",
    "currency_format": "string",
    "thousand_separator": "string",
    "decimal_separator": "string",
    "decimal_number": "non_negative_number",
    "timezone": "string",
    "date_format": "string",
    "time_format": "string",
    "default_shipping_country": "string",
    "default_shipping_state": "string",
    "default_shipping_city": "string",
    "default_product_sorting": "string",
    "product_fields": "string",
    "products_limit": "positive_number",
    "weight_unit": "string",
    "length_unit": "string",
    "hide_billing_address": "boolean",
    "order_confirmation_copy_to": "string",
}

# Stored value types accepted per rule; anything else reads as the default
_RULE_TYPES = {
    "string": (str,),
    "non_negative_number": (int, float),
    "positive_number": (int, float),
    "boolean": (bool,),
}

_NULLABLE_FIELDS = ("domain", "logo_file", "products_limit")


def _fits(key: str, value: Any) -> bool:
    if value is None:
        return key in _NULLABLE_FIELDS
    rule = FIELD_RULES.get(key)
    if rule != "boolean" and isinstance(value, bool):
        return False
    return isinstance(value, _RULE_TYPES.get(rule, ()))


def build_view(raw: Any) -> dict[str, Any]:
    """Overlay a stored document on a fresh copy of the defaults and derive the logo URL."""
    data = dict(SETTINGS_DEFAULTS)
    if isinstance(raw, dict):
        # Only recognized fields, so storage identity keys never leak
        data.update(
            (key, value)
            for key, value in raw.items()
            if key in SETTINGS_DEFAULTS and _fits(key, value)
        )

    if data["domain"] is None:
        data["domain"] = ""

    logo_file = data["logo_file"]
    if isinstance(logo_file, str) and len(logo_file) > 0:
        data["logo"] = urljoin(data["domain"], f"{FILES_UPLOAD_URL}/{logo_file}")
    else:
        data["logo"] = None
    return data


def get_all() -> SettingsResponse:
    return SettingsResponse(**build_view(settings_repository.find_one()))


def build_patch(data: dict[str, Any]) -> dict[str, Any]:
    """Coerce the recognized fields of an update payload.

    Fields that are not settings are dropped. Fields missing from the
    payload are left out so the stored values stay untouched.
    """
    if len(data) == 0:
        raise ValidationError("empty input")

    patch = {}
    for key in SETTINGS_DEFAULTS:
        if key not in data:
            continue
        coerce = COERCERS.get(FIELD_RULES.get(key))
        if coerce is None:
            raise ValidationError(f"Unknown setting: {key}")
        patch[key] = coerce(data[key])
    return patch


def insert_default_settings_if_empty() -> None:
    if settings_repository.count() == 0:
        logger.debug("Seeding default store settings")
        settings_repository.insert_one(dict(SETTINGS_DEFAULTS))


def update(data: dict[str, Any]) -> SettingsResponse:
    patch = build_patch(data)
    insert_default_settings_if_empty()
    settings_repository.upsert(patch)
    logger.info("Updated store settings: %s", ", ".join(sorted(patch)) or "nothing")
    return get_all()
