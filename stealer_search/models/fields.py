"""Search fields accepted by the infections search endpoint."""
from __future__ import annotations

from enum import Enum


class FieldKind(Enum):
    """How a field's filter values are carried in a search request."""

    ARRAY = "array"
    SCALAR = "scalar"
    DATE = "date"


class FieldName(str, Enum):
    """Class defining the searchable fields.

    The member value is the request key sent to the service.
    """

    EMAILS = "emails"
    DOMAINS = "domains"
    ROOT_DOMAINS = "root_domains"
    APP_DOMAINS = "app_domains"
    EMAIL_DOMAINS = "email_domains"
    IPS = "ips"
    COUNTRY = "country"
    HWID = "hwid"
    USER_NAME = "user_name"
    STEALER_TYPE = "stealer_type"
    INFECTION_DATE_FROM = "infection_date_from"
    INFECTION_DATE_TO = "infection_date_to"
    CREATED_DATE_FROM = "created_date_from"
    CREATED_DATE_TO = "created_date_to"

    @property
    def kind(self) -> FieldKind:
        return _FIELD_KINDS.get(self, FieldKind.SCALAR)

    @property
    def label(self) -> str:
        return _FIELD_LABELS[self]

    @property
    def is_date(self) -> bool:
        return self.kind is FieldKind.DATE

    @classmethod
    def parse(cls, text: str) -> FieldName:
        """Resolve a request key or a display label into a field.

        Raises
        ------
        ValueError
            If no field matches.
        """
        wanted = text.strip().lower()
        for member in cls:
            if wanted in (member.value, member.label.lower()):
                return member
        raise ValueError(f"Unknown search field: {text!r}")


_FIELD_KINDS: dict[FieldName, FieldKind] = {
    FieldName.EMAILS: FieldKind.ARRAY,
    FieldName.DOMAINS: FieldKind.ARRAY,
    FieldName.ROOT_DOMAINS: FieldKind.ARRAY,
    FieldName.APP_DOMAINS: FieldKind.ARRAY,
    FieldName.EMAIL_DOMAINS: FieldKind.ARRAY,
    FieldName.IPS: FieldKind.ARRAY,
    FieldName.INFECTION_DATE_FROM: FieldKind.DATE,
    FieldName.INFECTION_DATE_TO: FieldKind.DATE,
    FieldName.CREATED_DATE_FROM: FieldKind.DATE,
    FieldName.CREATED_DATE_TO: FieldKind.DATE,
}

_FIELD_LABELS: dict[FieldName, str] = {
    FieldName.EMAILS: "Emails",
    FieldName.DOMAINS: "Domains",
    FieldName.ROOT_DOMAINS: "Root Domains",
    FieldName.APP_DOMAINS: "App Domains",
    FieldName.EMAIL_DOMAINS: "Email Domains",
    FieldName.IPS: "IPs",
    FieldName.COUNTRY: "Country",
    FieldName.HWID: "HWID",
    FieldName.USER_NAME: "User Name",
    FieldName.STEALER_TYPE: "Stealer Type",
    FieldName.INFECTION_DATE_FROM: "Infection Date From",
    FieldName.INFECTION_DATE_TO: "Infection Date To",
    FieldName.CREATED_DATE_FROM: "Created Date From",
    FieldName.CREATED_DATE_TO: "Created Date To",
}

# The row holding this field is pinned so every request carries a filter.
DEFAULT_FIELD = FieldName.DOMAINS
