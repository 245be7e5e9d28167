"""Settings Data Transfer Objects."""

from pydantic import BaseModel


class SettingsResponse(BaseModel):
    """Complete settings view. Built from the stored document over the defaults."""

    domain: str
    logo_file: str | None
    language: str
    currency_code: str
    currency_symbol: str
    currency_format: str
    thousand_separator: str
    decimal_separator: str
    decimal_number: int | float
    timezone: str
    date_format: str
    time_format: str
    default_shipping_country: str
    default_shipping_state: str
    default_shipping_city: str
    default_product_sorting: str
    product_fields: str
    products_limit: int | float | None
    weight_unit: str
    length_unit: str
    hide_billing_address: bool
    order_confirmation_copy_to: str
    logo: str | None = None


class LogoUploadResponse(BaseModel):
    file: str
    size: int
