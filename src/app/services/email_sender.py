from abc import ABC, abstractmethod


class EmailDeliveryError(Exception):
    """Raised when the transport could not hand the message off"""


class IEmailSender(ABC):
    """Outbound email interface - application layer"""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        """Deliver an HTML email, raising EmailDeliveryError on failure"""
        pass
