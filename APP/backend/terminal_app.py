#!/usr/bin/env python3
"""Terminal-based Customer Service Desk"""

import sys
import os
import logging

# Add parent directory to path
sys.path.append(os.path.dirname(__file__))

from config import SEED_ON_START, setup_logging
from data_structures import EmptyStructureError
from desk import ServiceDesk

logger = logging.getLogger(__name__)


class ServiceDeskTerminal:
    def __init__(self, desk=None):
        if desk is None:
            desk = ServiceDesk()
            if SEED_ON_START:
                desk.seed()
        self.desk = desk

    def print_header(self, title):
        """Print formatted header"""
        print("\n" + "=" * 46)
        print(f"  {title}")
        print("=" * 46)

    def read_option(self):
        """Read a menu option, None when not a number"""
        raw = input("Escolha uma opção: ").strip()
        try:
            return int(raw)
        except ValueError:
            return None

    # Queue
    def view_queue(self):
        """Show waiting customers, front first"""
        print("\n=== Fila de Atendimento (Frente -> Trás) ===")
        if self.desk.queue.is_empty():
            print("[Fila vazia]")
            return

        for position, customer in enumerate(self.desk.queue.iter_front_to_back(), 1):
            print(f"[{position}] {customer.as_customer()}")

    def serve_next_customer(self):
        """Serve the front customer and save it in history"""
        try:
            served, record = self.desk.serve_next_customer()
        except EmptyStructureError as e:
            print(e)
            return

        print("\n--- ATENDIMENTO REALIZADO ---")
        print(f"Cliente Atendido: {served.as_customer()}")
        print(f"Atendimento salvo no Histórico (ID: {record.id}).")

    def add_customer(self):
        """Enqueue a customer typed by the operator"""
        print("\n--- Adicionar Cliente à Fila ---")
        customer_id = input("ID do Cliente (CLIXXX): ").strip()
        name = input("Nome do Cliente: ").strip()
        reason = input("Motivo do Atendimento: ").strip()

        self.desk.add_customer(customer_id, name, reason)
        print(f"Cliente {name} (ID: {customer_id}) adicionado à fila.")

    # History
    def view_history(self):
        """Show request history, most recent first"""
        print("\n=== HISTÓRICO DE SOLICITAÇÕES (Topo -> Base) ===")
        if self.desk.history.is_empty():
            print("[Histórico vazio]")
            return

        for position, request in enumerate(self.desk.history.iter_top_to_bottom(), 1):
            print(f"[{position}] {request.as_request()}")

    def add_request(self):
        """Push a request typed by the operator"""
        print("\n--- Adicionar Solicitação ao Histórico ---")
        request_id = input("ID da Solicitação (REQXXX): ").strip()
        description = input("Descrição da Solicitação: ").strip()

        self.desk.add_request(request_id, description)
        print(f"Solicitação {request_id} adicionada ao Histórico.")

    def remove_last_request(self):
        """Pop the most recent request"""
        try:
            removed = self.desk.remove_last_request()
        except EmptyStructureError as e:
            print(e)
            return

        print("\n--- REMOÇÃO DO HISTÓRICO ---")
        print(f"Removido do Histórico (Topo): {removed.as_request()}")

    def show_status(self):
        """Empty / non-empty state of both structures"""
        status = self.desk.status()
        queue_state = "VAZIA" if status['queue_empty'] else "NÃO VAZIA"
        history_state = "VAZIA" if status['history_empty'] else "NÃO VAZIA"

        print("\n--- STATUS DAS ESTRUTURAS ---")
        print(f"Fila de Atendimento: {queue_state} ({status['queue_size']})")
        print(f"Histórico de Solicitações: {history_state} ({status['history_size']})")

    # Menus
    def print_menu(self):
        self.print_header("SISTEMA DE GERENCIAMENTO DE ATENDIMENTO")
        print("1. Ver fila de atendimento (Fila)")
        print("2. Atender próximo cliente (Desenfileirar/Dequeue)")
        print("3. Ver histórico de solicitações (Pilha)")
        print("4. Adicionar solicitação ao histórico (Empilhar/Push)")
        print("5. Remover última solicitação do histórico (Desempilhar/Pop)")
        print("6. Adicionar cliente à fila (Enfileirar/Enqueue)")
        print("7. Verificar Status (Fila e Pilha)")
        print("0. Sair")
        print("=" * 46)

    def main_menu(self):
        """Main entry menu"""
        actions = {
            1: self.view_queue,
            2: self.serve_next_customer,
            3: self.view_history,
            4: self.add_request,
            5: self.remove_last_request,
            6: self.add_customer,
            7: self.show_status,
        }

        while True:
            self.print_menu()
            choice = self.read_option()

            if choice is None:
                print("Entrada inválida. Por favor, digite um número.")
                continue
            if choice == 0:
                print("Sistema de Gerenciamento encerrado.")
                break

            action = actions.get(choice)
            if action is None:
                print("Opção inválida. Tente novamente.")
                continue

            logger.debug(f"Menu option {choice}")
            action()


def main():
    setup_logging()
    app = ServiceDeskTerminal()
    try:
        app.main_menu()
    except (EOFError, KeyboardInterrupt):
        print("\nSistema de Gerenciamento encerrado.")


if __name__ == "__main__":
    main()
