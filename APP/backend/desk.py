"""Service desk session: waiting queue plus request history"""
import logging
import time
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from config import TIMESTAMP_FORMAT
from data_structures import EmptyStructureError, Queue, Stack
from elements import Customer, ServiceRequest

logger = logging.getLogger(__name__)

AUTO_REQUEST_PREFIX = 'REQ_AUTO_'

INITIAL_CUSTOMERS = [
    Customer("CLI001", "Maria Silva", "Dúvida sobre produto"),
    Customer("CLI002", "João Souza", "Reclamação de serviço"),
    Customer("CLI003", "Ana Costa", "Solicitação de reembolso"),
    Customer("CLI004", "Pedro Alves", "Informações de entrega"),
    Customer("CLI005", "Carla Dias", "Agendamento de visita"),
    Customer("CLI006", "Lucas Martins", "Alteração de pedido"),
    Customer("CLI007", "Patrícia Rocha", "Cancelamento de contrato"),
    Customer("CLI008", "Rafael Lima", "Renovação de assinatura"),
    Customer("CLI009", "Fernanda Gomes", "Suporte para instalação"),
    Customer("CLI010", "Carlos Eduardo", "Pedido de orçamento"),
]

INITIAL_HISTORY = [
    ServiceRequest("REQ001", "Instalação de software", "2024-08-20 10:30"),
    ServiceRequest("REQ002", "Manutenção preventiva", "2024-08-20 11:00"),
    ServiceRequest("REQ003", "Atualização de sistema", "2024-08-20 11:30"),
    ServiceRequest("REQ004", "Suporte técnico", "2024-08-20 12:00"),
    ServiceRequest("REQ005", "Troca de equipamento", "2024-08-20 12:30"),
    ServiceRequest("REQ006", "Consulta de garantia", "2024-08-20 13:00"),
    ServiceRequest("REQ007", "Reparo de impressora", "2024-08-20 13:30"),
    ServiceRequest("REQ008", "Configuração de rede", "2024-08-20 14:00"),
    ServiceRequest("REQ009", "Restauração de dados", "2024-08-20 14:30"),
    ServiceRequest("REQ010", "Consulta técnica", "2024-08-20 15:00"),
]


def current_timestamp() -> str:
    """Current local time as display string"""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def generate_request_suffix() -> str:
    """Short time based suffix for generated request ids"""
    return str(int(time.time() * 1000) % 1000000)


class ServiceDesk:
    """Owns the customer queue and the request history"""

    def __init__(self, clock: Optional[Callable[[], str]] = None,
                 id_factory: Optional[Callable[[], str]] = None):
        self.queue = Queue()
        self.history = Stack()
        self.clock = clock or current_timestamp
        self.id_factory = id_factory or generate_request_suffix

    def seed(self):
        """Load the initial customers and history"""
        for customer in INITIAL_CUSTOMERS:
            self.queue.enqueue(customer)
        for request in INITIAL_HISTORY:
            self.history.push(request)
        logger.info(f"Desk seeded: {len(INITIAL_CUSTOMERS)} customers, {len(INITIAL_HISTORY)} requests")

    def serve_next_customer(self) -> Tuple[Customer, ServiceRequest]:
        """Dequeue next customer and record the service in history"""
        try:
            served = self.queue.dequeue()
        except EmptyStructureError:
            logger.warning("Serve requested with empty queue")
            raise

        record = ServiceRequest(
            AUTO_REQUEST_PREFIX + self.id_factory(),
            f"Atendimento finalizado do cliente {served.primary_text} (Motivo: {served.secondary_text})",
            self.clock()
        )
        self.history.push(record)
        logger.info(f"Served {served.id}, recorded as {record.id}")
        return served, record

    def add_request(self, request_id: str, description: str) -> ServiceRequest:
        """Push a new request stamped with the current time"""
        request = ServiceRequest(request_id, description, self.clock())
        self.history.push(request)
        logger.info(f"Request {request_id} added to history")
        return request

    def remove_last_request(self) -> ServiceRequest:
        """Pop most recent request from history"""
        try:
            removed = self.history.pop()
        except EmptyStructureError:
            logger.warning("Pop requested with empty history")
            raise
        logger.info(f"Request {removed.id} removed from history")
        return removed

    def add_customer(self, customer_id: str, name: str, reason: str) -> Customer:
        """Put a customer at the back of the queue"""
        customer = Customer(customer_id, name, reason)
        self.queue.enqueue(customer)
        logger.info(f"Customer {customer_id} enqueued")
        return customer

    def waiting_customers(self) -> List[Customer]:
        return self.queue.get_all()

    def history_records(self) -> List[ServiceRequest]:
        return self.history.get_all()

    def status(self) -> dict:
        """Empty/size summary of both structures"""
        return {
            'queue_empty': self.queue.is_empty(),
            'history_empty': self.history.is_empty(),
            'queue_size': self.queue.size(),
            'history_size': self.history.size()
        }
