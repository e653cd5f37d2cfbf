"""Priority queues over key/value pairs with heap, list and array strategies, and a timing benchmark."""

__version__ = "0.1.0"

__all__ = ["benchmark", "dynamic_array", "generator", "heap", "linked_list", "pair", "strategies"]