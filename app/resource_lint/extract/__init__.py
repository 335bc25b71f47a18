from .logic import extract_logic_references, find_lookup_arguments, find_service_names
from .markup import extract_markup_references, find_markup_tokens

__all__ = [
    "extract_logic_references",
    "extract_markup_references",
    "find_lookup_arguments",
    "find_markup_tokens",
    "find_service_names",
]
