import dataclasses

import pytest

from elements import Customer, Element, ServiceRequest


def test_customer_format():
    customer = Customer("CLI001", "Maria Silva", "Dúvida sobre produto")
    assert customer.name == "Maria Silva"
    assert customer.reason == "Dúvida sobre produto"
    assert str(customer) == "ID Cliente: CLI001 | Nome: Maria Silva | Motivo: Dúvida sobre produto"


def test_request_format():
    request = ServiceRequest("REQ001", "Instalação de software", "2024-08-20 10:30")
    assert request.description == "Instalação de software"
    assert request.timestamp == "2024-08-20 10:30"
    assert request.describe() == (
        "ID Solicitacao: REQ001 | Descricao: Instalação de software | Data/Hora: 2024-08-20 10:30"
    )


def test_variant_mode_ignores_id_prefix():
    # A customer with a non CLI id still renders as a customer
    customer = Customer("X9", "Ana", "Troca")
    assert customer.describe().startswith("ID Cliente: X9")
    request = ServiceRequest("CLI123", "Oddly named", "now")
    assert request.describe().startswith("ID Solicitacao: CLI123")


def test_plain_element_falls_back_on_prefix():
    assert Element("CLI777", "Ana", "Troca").describe().startswith("ID Cliente:")
    assert Element("REQ777", "Backup", "now").describe().startswith("ID Solicitacao:")
    assert Element("", "Nada", "now").describe().startswith("ID Solicitacao:")


def test_explicit_modes():
    element = Element("CLI1", "a", "b")
    assert element.as_request() == "ID Solicitacao: CLI1 | Descricao: a | Data/Hora: b"
    assert element.as_customer() == "ID Cliente: CLI1 | Nome: a | Motivo: b"


def test_elements_are_immutable():
    customer = Customer("CLI001", "Maria", "Dúvida")
    with pytest.raises(dataclasses.FrozenInstanceError):
        customer.id = "CLI002"


def test_structural_equality_and_duplicates():
    assert Customer("CLI001", "Maria", "x") == Customer("CLI001", "Maria", "x")
    assert Customer("CLI001", "Maria", "x") != Customer("CLI001", "Maria", "y")
