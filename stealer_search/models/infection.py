"""Data model to define infection logs returned by the search service."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComputerInformation(BaseModel):
    """Class defining the compromised host details of an infection.

    Attributes
    ----------
    infection_date : str
        Timestamp of the infection as sent by the service.
    ip : str
        The host's IP address.
    country : str
        The host's country.
    os : str
        The host's operating system.
    malware_path : str
        Where the stealer binary ran from.
    username : str
        The session user name.
    hwid : str
        The hardware identifier.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    infection_date: str = ""
    ip: str = ""
    country: str = ""
    os: str = ""
    malware_path: str = ""
    username: str = ""
    hwid: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class InfectionRecord(BaseModel):
    """Class defining one infection log."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    log_file_name: str = ""
    stealer_type: str | None = None
    computer_information: ComputerInformation = Field(default_factory=ComputerInformation)

    @field_validator("log_file_name", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("computer_information", mode="before")
    @classmethod
    def missing_host(cls, value: Any) -> Any:
        return {} if value is None else value
