"""Core data structures for the Customer Service Desk"""

STACK_EMPTY_MESSAGE = "Erro: Pilha de Histórico de Solicitações está vazia."
QUEUE_EMPTY_MESSAGE = "Erro: Fila de Atendimento está vazia."


class EmptyStructureError(Exception):
    """Raised when removing from an empty stack or queue"""


class Node:
    """Node for Linked List"""
    def __init__(self, data):
        self.data = data
        self.next = None


class Stack:
    """Stack (LIFO) on a singly linked list, used for the request history"""
    def __init__(self):
        self.top = None
        self._size = 0

    def is_empty(self):
        """Check if stack is empty"""
        return self.top is None

    def push(self, item):
        """Put item on top. O(1)"""
        new_node = Node(item)
        new_node.next = self.top
        self.top = new_node
        self._size += 1

    def pop(self):
        """Remove and return top item. O(1)"""
        if self.is_empty():
            raise EmptyStructureError(STACK_EMPTY_MESSAGE)

        removed = self.top
        self.top = removed.next
        removed.next = None
        self._size -= 1
        return removed.data

    def peek(self):
        """Get top item without removing"""
        if self.is_empty():
            raise EmptyStructureError(STACK_EMPTY_MESSAGE)
        return self.top.data

    def size(self):
        """Get stack size"""
        return self._size

    def iter_top_to_bottom(self):
        """Yield items from top to bottom without modifying the stack"""
        current = self.top
        while current:
            yield current.data
            current = current.next

    def get_all(self):
        """Get all items as list, top first"""
        return list(self.iter_top_to_bottom())

    def __iter__(self):
        return self.iter_top_to_bottom()


class Queue:
    """Queue (FIFO) on a singly linked list, used for the waiting customers"""
    def __init__(self):
        self.front = None  # dequeue side
        self.back = None   # enqueue side
        self._size = 0

    def is_empty(self):
        """Check if queue is empty"""
        return self.front is None

    def enqueue(self, item):
        """Add item at the back. O(1)"""
        new_node = Node(item)

        if self.is_empty():
            self.front = new_node
        else:
            self.back.next = new_node
        self.back = new_node
        self._size += 1

    def dequeue(self):
        """Remove and return front item. O(1)"""
        if self.is_empty():
            raise EmptyStructureError(QUEUE_EMPTY_MESSAGE)

        removed = self.front
        self.front = removed.next
        removed.next = None

        # back must not outlive the last node
        if self.front is None:
            self.back = None

        self._size -= 1
        return removed.data

    def peek(self):
        """Get front item without removing"""
        if self.is_empty():
            raise EmptyStructureError(QUEUE_EMPTY_MESSAGE)
        return self.front.data

    def size(self):
        """Get queue size"""
        return self._size

    def iter_front_to_back(self):
        """Yield items from front to back without modifying the queue"""
        current = self.front
        while current:
            yield current.data
            current = current.next

    def get_all(self):
        """Get all items in queue, front first"""
        return list(self.iter_front_to_back())

    def __iter__(self):
        return self.iter_front_to_back()
