"""Service offering domain entity."""

from dataclasses import dataclass

DEFAULT_SERVICE_ICON = "FaCode"


@dataclass
class Service:
    """A service offered on the portfolio.

    ``icon`` is either a symbolic icon key (``FaCode``) or a media reference
    to an uploaded image.
    """

    id: str
    number: str = ""
    title: str = ""
    description: str = ""
    icon: str = DEFAULT_SERVICE_ICON
    order: int = 0
