"""Red-black tree, name-ordered state collection, and Brazilian record helpers."""

__version__ = "0.1.0"
__all__ = ["cep", "console", "cpf", "date", "models", "rbtree", "state_list"]