from .main_functions import (cardinality, domain_width, encoding_bits, is_valid,
    rank, rank_items, unrank, unrank_items
)
