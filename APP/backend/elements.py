"""Records held by the service desk structures"""
from dataclasses import dataclass

CUSTOMER_ID_PREFIX = 'CLI'


@dataclass(frozen=True)
class Element:
    """Generic desk record: customer or service request"""
    id: str
    primary_text: str
    secondary_text: str

    def as_request(self) -> str:
        """Format as a history (stack) entry"""
        return (f"ID Solicitacao: {self.id} | Descricao: {self.primary_text}"
                f" | Data/Hora: {self.secondary_text}")

    def as_customer(self) -> str:
        """Format as a waiting-queue entry"""
        return f"ID Cliente: {self.id} | Nome: {self.primary_text} | Motivo: {self.secondary_text}"

    def describe(self) -> str:
        """Display text when the caller does not know where the record came from"""
        # Cosmetic only: customer ids are conventionally "CLIxxx"
        if self.id and self.id.startswith(CUSTOMER_ID_PREFIX):
            return self.as_customer()
        return self.as_request()

    def __str__(self):
        return self.describe()


@dataclass(frozen=True)
class Customer(Element):
    """Customer waiting in the service queue"""

    @property
    def name(self) -> str:
        return self.primary_text

    @property
    def reason(self) -> str:
        return self.secondary_text

    def describe(self) -> str:
        return self.as_customer()


@dataclass(frozen=True)
class ServiceRequest(Element):
    """Entry of the request history"""

    @property
    def description(self) -> str:
        return self.primary_text

    @property
    def timestamp(self) -> str:
        return self.secondary_text

    def describe(self) -> str:
        return self.as_request()
