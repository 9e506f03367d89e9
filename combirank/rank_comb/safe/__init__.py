from .safe_functions import all_objects_safe, generate_safe, rank_safe
